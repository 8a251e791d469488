"""Event bus dependency factory.

Application-scoped singleton for domain event publishing.
Configures all event handlers and subscriptions at startup.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sales.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns the adapter selected by Settings.event_bus_type:
        - 'in-memory': InMemoryEventBus (single process)

    Subscriptions:
        - PaymentApproved → LoggingEventHandler.handle_payment_approved
        - PaymentRefused → LoggingEventHandler.handle_payment_refused

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        ValueError: Unsupported event_bus_type.

    Usage:
        event_bus = get_event_bus()
        for event in payment.pull_domain_events():
            await event_bus.publish(event)
    """
    from sales.core.config import get_settings
    from sales.core.container.infrastructure import get_logger
    from sales.domain.events.payment_events import PaymentApproved, PaymentRefused
    from sales.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from sales.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    event_bus_type = get_settings().event_bus_type

    if event_bus_type == "in-memory":
        event_bus = InMemoryEventBus(logger=get_logger())
    else:
        raise ValueError(
            f"Unsupported EVENT_BUS_TYPE: {event_bus_type}. Supported: 'in-memory'"
        )

    logging_handler = LoggingEventHandler(logger=get_logger())
    event_bus.subscribe(PaymentApproved, logging_handler.handle_payment_approved)
    event_bus.subscribe(PaymentRefused, logging_handler.handle_payment_refused)

    return event_bus
