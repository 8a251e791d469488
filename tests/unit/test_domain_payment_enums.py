"""Unit tests for PaymentStatus and PaymentMethod enums.

Tests cover:
- values()/is_valid() helpers
- parse() returning Result types
- String rendering
- State groupings (active/completed)
"""

import pytest

from sales.core.result import Failure, Success
from sales.domain.enums.payment_method import PaymentMethod
from sales.domain.enums.payment_status import PaymentStatus
from sales.domain.errors.payment_error import PaymentError


@pytest.mark.unit
class TestPaymentStatusEnumMethods:
    """Test PaymentStatus enum helper methods."""

    def test_values_returns_all_statuses(self):
        """Test PaymentStatus.values() returns all status strings."""
        # Act
        values = PaymentStatus.values()

        # Assert
        assert values == ["pending", "authorized", "refused", "refunded", "cancelled"]

    def test_is_valid(self):
        """Test is_valid accepts known values only (case sensitive)."""
        assert PaymentStatus.is_valid("authorized") is True
        assert PaymentStatus.is_valid("AUTHORIZED") is False
        assert PaymentStatus.is_valid("") is False

    def test_parse_known_status(self):
        """Test parse returns the member for a known value."""
        # Act
        result = PaymentStatus.parse("refused")

        # Assert
        assert isinstance(result, Success)
        assert result.value is PaymentStatus.REFUSED

    @pytest.mark.parametrize("value", ["", "unknown", "Pending"])
    def test_parse_unknown_status_fails(self, value):
        """Test parse fails with INVALID_STATUS for unknown values."""
        # Act
        result = PaymentStatus.parse(value)

        # Assert
        assert isinstance(result, Failure)
        assert result.error == PaymentError.INVALID_STATUS

    def test_str_renders_value(self):
        """Test str() gives the lower-case value."""
        assert str(PaymentStatus.AUTHORIZED) == "authorized"
        assert f"{PaymentStatus.PENDING}" == "pending"

    def test_active_states_returns_only_pending(self):
        """Test only PENDING accepts transitions."""
        assert PaymentStatus.active_states() == [PaymentStatus.PENDING]

    def test_completed_states(self):
        """Test AUTHORIZED and REFUSED are the reachable terminal states."""
        # Act
        completed = PaymentStatus.completed_states()

        # Assert
        assert completed == [PaymentStatus.AUTHORIZED, PaymentStatus.REFUSED]
        assert PaymentStatus.REFUNDED not in completed
        assert PaymentStatus.CANCELLED not in completed


@pytest.mark.unit
class TestPaymentMethodEnumMethods:
    """Test PaymentMethod enum helper methods."""

    def test_values_returns_all_methods(self):
        """Test PaymentMethod.values() returns all method strings."""
        assert PaymentMethod.values() == [
            "credit_card",
            "debit_card",
            "cash",
            "pix",
            "bank_transfer",
            "bank_slip",
        ]

    def test_is_valid(self):
        """Test is_valid accepts known values only."""
        assert PaymentMethod.is_valid("pix") is True
        assert PaymentMethod.is_valid("PIX") is False
        assert PaymentMethod.is_valid("cheque") is False

    def test_parse_known_method(self):
        """Test parse returns the member for a known value."""
        # Act
        result = PaymentMethod.parse("bank_slip")

        # Assert
        assert isinstance(result, Success)
        assert result.value is PaymentMethod.BANK_SLIP

    def test_parse_unknown_method_fails(self):
        """Test parse fails with INVALID_METHOD."""
        # Act
        result = PaymentMethod.parse("cheque")

        # Assert
        assert isinstance(result, Failure)
        assert result.error == PaymentError.INVALID_METHOD

    def test_str_renders_value(self):
        """Test str() gives the value."""
        assert str(PaymentMethod.CREDIT_CARD) == "credit_card"

    def test_members_compare_equal_to_values(self):
        """Test str Enum members equal their raw values."""
        assert PaymentMethod.PIX == "pix"
