"""Domain-level error codes (machine-readable).

Error codes follow the AGGREGATE.REASON naming convention
(e.g. "PAYMENT.NOT_PENDING"). A code is the only thing that identifies a
failure: two DomainError values with the same code are the same failure,
whatever their message or wrapped cause.

Categories:
- Validation errors (*.INVALID_*)
- State precondition errors (*.NOT_*, *_AFTER_COMPLETION, *_ALREADY_DEFINED)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow AGGREGATE.REASON naming convention.
    """

    # Payment validation errors
    PAYMENT_INVALID_ORDER_ID = "PAYMENT.INVALID_ORDER_ID"
    PAYMENT_INVALID_AMOUNT = "PAYMENT.INVALID_AMOUNT"
    PAYMENT_INVALID_METHOD = "PAYMENT.INVALID_METHOD"
    PAYMENT_INVALID_STATUS = "PAYMENT.INVALID_STATUS"
    PAYMENT_INVALID_TRANSACTION_CODE = "PAYMENT.INVALID_TRANSACTION_CODE"

    # Payment state errors
    PAYMENT_NOT_PENDING = "PAYMENT.NOT_PENDING"
    PAYMENT_TRANSACTION_CODE_NOT_DEFINED = "PAYMENT.TRANSACTION_CODE_NOT_DEFINED"
    PAYMENT_TRANSACTION_CODE_AFTER_COMPLETION = (
        "PAYMENT.TRANSACTION_CODE_AFTER_COMPLETION"
    )
    PAYMENT_TRANSACTION_CODE_ALREADY_DEFINED = "PAYMENT.TRANSACTION_CODE_ALREADY_DEFINED"
