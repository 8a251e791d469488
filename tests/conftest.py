"""Shared pytest helpers for the sales domain tests.

Provides:
1. Factory helpers for Payment entities in common states
2. Settings/container cache isolation between tests
"""

from decimal import Decimal

import pytest

from sales.core.config import get_settings
from sales.core.container import get_event_bus, get_logger
from sales.core.result import must
from sales.domain.entities.payment import Payment
from sales.domain.enums.payment_method import PaymentMethod


@pytest.fixture(autouse=True)
def clear_cached_singletons():
    """Reset lru_cache'd settings and container singletons around each test.

    Tests that patch os.environ must never leak a cached Settings instance
    (or a logger/event bus built from it) into the next test.
    """
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_event_bus.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_event_bus.cache_clear()


# Test helper functions for domain entities


def create_payment(
    order_id: str = "order-123",
    amount: Decimal | int | float = Decimal("100.00"),
    method: PaymentMethod = PaymentMethod.CREDIT_CARD,
) -> Payment:
    """Helper to create a PENDING Payment for testing.

    Args:
        order_id: Order ID (default: "order-123").
        amount: Payment amount (default: 100.00).
        method: Payment method (default: credit card).

    Returns:
        Payment in PENDING status with no transaction code.

    Raises:
        UnexpectedFailureError: If the arguments are invalid (test bug).
    """
    return must(Payment.create(order_id, amount, method))


def create_payment_with_code(
    transaction_code: str = "TXN-123",
    **kwargs,
) -> Payment:
    """Helper to create a PENDING Payment that already has a transaction code.

    Args:
        transaction_code: Gateway code to define (default: "TXN-123").
        **kwargs: Forwarded to create_payment().

    Returns:
        Payment ready to be confirmed or refused.
    """
    payment = create_payment(**kwargs)
    must(payment.define_transaction_code(transaction_code))
    return payment
