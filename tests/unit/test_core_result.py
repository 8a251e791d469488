"""Unit tests for Result types and must().

Tests cover:
- Success/Failure construction and pattern matching
- Immutability
- must() unwrapping and failure escalation
"""

import pytest

from sales.core.result import Failure, Success, UnexpectedFailureError, must
from sales.domain.errors.payment_error import PaymentError


@pytest.mark.unit
class TestResultTypes:
    """Test Success and Failure."""

    def test_success_matches_keyword_pattern(self):
        """Test Success is matched with a keyword pattern."""
        # Arrange
        result = Success(value=42)

        # Act
        match result:
            case Success(value=value):
                matched = value
            case Failure(error=_):
                matched = None

        # Assert
        assert matched == 42

    def test_failure_matches_keyword_pattern(self):
        """Test Failure is matched with a keyword pattern."""
        # Arrange
        result = Failure(error=PaymentError.NOT_PENDING)

        # Act
        match result:
            case Success(value=_):
                matched = None
            case Failure(error=error):
                matched = error

        # Assert
        assert matched == PaymentError.NOT_PENDING

    def test_results_are_frozen(self):
        """Test result values cannot be reassigned."""
        # Arrange
        result = Success(value=1)

        # Act / Assert
        with pytest.raises(AttributeError):
            result.value = 2

    def test_results_require_keyword_arguments(self):
        """Test positional construction is rejected."""
        with pytest.raises(TypeError):
            Success(1)


@pytest.mark.unit
class TestMust:
    """Test must() helper."""

    def test_must_returns_success_value(self):
        """Test the wrapped value is returned."""
        assert must(Success(value="ok")) == "ok"

    def test_must_returns_none_value(self):
        """Test Success(None) unwraps to None without raising."""
        assert must(Success(value=None)) is None

    def test_must_raises_on_failure(self):
        """Test a Failure aborts with UnexpectedFailureError."""
        # Act
        with pytest.raises(UnexpectedFailureError) as exc_info:
            must(Failure(error=PaymentError.INVALID_AMOUNT))

        # Assert
        assert exc_info.value.error == PaymentError.INVALID_AMOUNT
        assert "PAYMENT.INVALID_AMOUNT" in str(exc_info.value)
        assert isinstance(exc_info.value, RuntimeError)

    def test_must_rejects_non_result(self):
        """Test anything other than a Result is a type error."""
        with pytest.raises(TypeError):
            must("not a result")
