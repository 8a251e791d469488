"""Guard functions for domain invariants.

Each guard is a pure function taking the value to check and the error to
report. It returns None when the check passes, or that error when it does
not. Guards never raise, whatever the input, so an operation can run all of
its checks and join the failures:

Usage:
    from sales.core.errors import join_errors
    from sales.core.validation import check_not_blank, check_positive

    error = join_errors(
        check_not_blank(order_id, PaymentError.INVALID_ORDER_ID),
        check_positive(amount, PaymentError.INVALID_AMOUNT),
    )
    if error is not None:
        return Failure(error=error)
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any

from sales.core.errors import DomainError


def check_not_blank(value: Any, error: DomainError) -> DomainError | None:
    """Fail unless value is a string with at least one non-whitespace char.

    Args:
        value: Candidate string. None and non-strings count as blank.
        error: Error to report on failure.

    Returns:
        None if valid, error otherwise.
    """
    if not isinstance(value, str) or not value.strip():
        return error
    return None


def check_positive(value: Any, error: DomainError) -> DomainError | None:
    """Fail unless value is a number strictly greater than zero.

    Zero, negatives, NaN, booleans, None and non-numeric values all fail.

    Args:
        value: Candidate number (int, float or Decimal).
        error: Error to report on failure.

    Returns:
        None if valid, error otherwise.
    """
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        return error
    try:
        if value > 0:
            return None
    except InvalidOperation:
        # Ordering comparisons against Decimal NaN signal
        pass
    return error


def check_matches_pattern(
    value: Any, pattern: re.Pattern[str], error: DomainError
) -> DomainError | None:
    """Fail unless value is a string matching the compiled pattern.

    A match anywhere in the value passes (pattern.search); anchor the
    pattern with ^ and $ when the whole value must match.

    Args:
        value: Candidate string.
        pattern: Pre-compiled regular expression.
        error: Error to report on failure.

    Returns:
        None if valid, error otherwise.
    """
    if not isinstance(value, str) or pattern.search(value) is None:
        return error
    return None


def check_not_absent(value: Any, error: DomainError) -> DomainError | None:
    """Fail when value is None (required field not set yet)."""
    if value is None:
        return error
    return None


def check_absent(value: Any, error: DomainError) -> DomainError | None:
    """Fail when value is set (field that may only be assigned once)."""
    if value is not None:
        return error
    return None
