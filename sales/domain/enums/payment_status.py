"""Payment lifecycle states.

State Machine:
    PENDING → AUTHORIZED (terminal)
    PENDING → REFUSED    (terminal)

    - PENDING: Created, awaiting the gateway answer
    - AUTHORIZED: Gateway confirmed the payment
    - REFUSED: Gateway declined the payment
    - REFUNDED: Declared for refunds; no transition reaches it yet
    - CANCELLED: Declared for cancellations; no transition reaches it yet

Usage:
    from sales.domain.enums import PaymentStatus

    if payment.status == PaymentStatus.AUTHORIZED:
        # Ship the order
"""

from enum import Enum

from sales.core.errors import DomainError
from sales.core.result import Failure, Result, Success
from sales.domain.errors.payment_error import PaymentError


class PaymentStatus(str, Enum):
    """Payment lifecycle status.

    String Enum:
        Inherits from str for easy serialization. str() renders the value.
    """

    PENDING = "pending"
    """Initial state; payment is awaiting processing."""

    AUTHORIZED = "authorized"
    """Payment was successfully confirmed. Terminal."""

    REFUSED = "refused"
    """Payment was declined by the gateway. Terminal."""

    REFUNDED = "refunded"
    """Previously authorized payment was refunded (not reachable yet)."""

    CANCELLED = "cancelled"
    """Payment was cancelled before completion (not reachable yet)."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings.

        Returns:
            list[str]: List of status values.
        """
        return [status.value for status in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid status.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid status.
        """
        return value in cls.values()

    @classmethod
    def parse(cls, value: str) -> Result["PaymentStatus", DomainError]:
        """Convert a stored string back into a PaymentStatus.

        Args:
            value: Status value (e.g. "authorized"). Case sensitive.

        Returns:
            Success(PaymentStatus): Known status.
            Failure(PaymentError.INVALID_STATUS): Unknown value.
        """
        if not cls.is_valid(value):
            return Failure(error=PaymentError.INVALID_STATUS)
        return Success(value=cls(value))

    @classmethod
    def active_states(cls) -> list["PaymentStatus"]:
        """Get states that still accept transitions.

        Returns:
            list[PaymentStatus]: Only PENDING.
        """
        return [cls.PENDING]

    @classmethod
    def completed_states(cls) -> list["PaymentStatus"]:
        """Get terminal states reachable from PENDING.

        Returns:
            list[PaymentStatus]: AUTHORIZED and REFUSED.
        """
        return [cls.AUTHORIZED, cls.REFUSED]
