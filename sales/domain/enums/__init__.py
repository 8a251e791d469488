"""Domain enums package.

Usage:
    from sales.domain.enums import PaymentMethod, PaymentStatus
"""

from sales.domain.enums.payment_method import PaymentMethod
from sales.domain.enums.payment_status import PaymentStatus

__all__ = [
    "PaymentMethod",
    "PaymentStatus",
]
