"""Event bus protocol (port) for domain events.

Entities only record the events their transitions produce. Delivering them
to subscribers is the job of an event bus supplied from outside the domain,
described here as a structural protocol.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure layer implements adapters (in-memory today)
    - Container (sales/core/container) provides the factory function

Usage:
    >>> from sales.core.container import get_event_bus
    >>>
    >>> event_bus = get_event_bus()
    >>> for event in payment.pull_domain_events():
    ...     await event_bus.publish(event)
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from sales.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async callable receiving one event and returning None (side effects only)."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing. Log errors but continue processing.
        2. **Async support**: Handlers are async.
        3. **Type-based routing**: Handlers registered for a specific event
           type only receive events of that exact type.
        4. **No ordering guarantees** between handlers of the same event.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (e.g., PaymentApproved).
                Exact type match only (no inheritance matching).
            handler: Async function called with each published event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        No handlers registered is a no-op. Handler exceptions are logged and
        never propagated to the publisher.

        Args:
            event: Domain event to publish.
        """
        ...
