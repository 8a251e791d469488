"""Payment domain errors.

Defines the sentinel errors for payment validation and state transitions.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)
    - Frozen DomainError instances, created once at import time

Usage:
    from sales.domain.errors import PaymentError

    result = payment.confirm_payment()
    match result:
        case Failure(error=error) if PaymentError.NOT_PENDING in error:
            # Payment already completed
            ...
"""

from sales.core.enums import ErrorCode
from sales.core.errors import new_error


class PaymentError:
    """Payment error constants.

    These are NOT exceptions - they are error value constants used in the
    railway-oriented programming pattern. Compare them by code: a wrapped
    copy equals its sentinel.

    Error Categories:
        - Validation errors: INVALID_ORDER_ID, INVALID_AMOUNT, INVALID_METHOD,
          INVALID_STATUS, INVALID_TRANSACTION_CODE
        - State errors: NOT_PENDING, TRANSACTION_CODE_NOT_DEFINED,
          TRANSACTION_CODE_AFTER_COMPLETION, TRANSACTION_CODE_ALREADY_DEFINED
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    INVALID_ORDER_ID = new_error(
        ErrorCode.PAYMENT_INVALID_ORDER_ID,
        "order ID cannot be null or whitespace",
    )

    INVALID_AMOUNT = new_error(
        ErrorCode.PAYMENT_INVALID_AMOUNT,
        "payment amount must be greater than zero",
    )

    INVALID_METHOD = new_error(
        ErrorCode.PAYMENT_INVALID_METHOD,
        "invalid payment method",
    )

    INVALID_STATUS = new_error(
        ErrorCode.PAYMENT_INVALID_STATUS,
        "invalid payment status",
    )

    INVALID_TRANSACTION_CODE = new_error(
        ErrorCode.PAYMENT_INVALID_TRANSACTION_CODE,
        "transaction code cannot be null or whitespace",
    )

    # -------------------------------------------------------------------------
    # State/Lifecycle Errors
    # -------------------------------------------------------------------------

    NOT_PENDING = new_error(
        ErrorCode.PAYMENT_NOT_PENDING,
        "payment is not in pending status",
    )

    TRANSACTION_CODE_NOT_DEFINED = new_error(
        ErrorCode.PAYMENT_TRANSACTION_CODE_NOT_DEFINED,
        "transaction code has not been defined yet",
    )

    TRANSACTION_CODE_AFTER_COMPLETION = new_error(
        ErrorCode.PAYMENT_TRANSACTION_CODE_AFTER_COMPLETION,
        "transaction code cannot be defined after payment has been confirmed or refused",
    )

    TRANSACTION_CODE_ALREADY_DEFINED = new_error(
        ErrorCode.PAYMENT_TRANSACTION_CODE_ALREADY_DEFINED,
        "transaction code has already been defined",
    )
