"""Domain errors package.

Usage:
    from sales.domain.errors import PaymentError
"""

from sales.domain.errors.payment_error import PaymentError

__all__ = [
    "PaymentError",
]
