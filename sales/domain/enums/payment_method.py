"""Payment method enumeration.

Defines the channels a customer can pay through.
"""

from enum import Enum

from sales.core.errors import DomainError
from sales.core.result import Failure, Result, Success
from sales.domain.errors.payment_error import PaymentError


class PaymentMethod(str, Enum):
    """Payment method chosen by the customer.

    String Enum:
        Inherits from str for easy serialization. str() renders the value,
        which is also what logs and event payloads carry.
    """

    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    CASH = "cash"
    PIX = "pix"
    """Pix instant transfer."""

    BANK_TRANSFER = "bank_transfer"
    """Bank transfer (TED/DOC)."""

    BANK_SLIP = "bank_slip"
    """Bank slip (boleto bancário)."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> list[str]:
        """Get all method values as strings."""
        return [method.value for method in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid payment method."""
        return value in cls.values()

    @classmethod
    def parse(cls, value: str) -> Result["PaymentMethod", DomainError]:
        """Convert an incoming string into a PaymentMethod.

        Args:
            value: Method value (e.g. "pix"). Case sensitive.

        Returns:
            Success(PaymentMethod): Known method.
            Failure(PaymentError.INVALID_METHOD): Unknown value.

        Example:
            >>> PaymentMethod.parse("pix")
            Success(value=<PaymentMethod.PIX: 'pix'>)
        """
        if not cls.is_valid(value):
            return Failure(error=PaymentError.INVALID_METHOD)
        return Success(value=cls(value))
