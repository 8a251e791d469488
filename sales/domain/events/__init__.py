"""Domain events module.

Usage:
    >>> from sales.domain.events import DomainEvent, PaymentApproved
    >>>
    >>> for event in payment.pull_domain_events():
    ...     await event_bus.publish(event)
"""

from sales.domain.events.base_event import DomainEvent
from sales.domain.events.payment_events import PaymentApproved, PaymentRefused

__all__ = [
    "DomainEvent",
    "PaymentApproved",
    "PaymentRefused",
]
