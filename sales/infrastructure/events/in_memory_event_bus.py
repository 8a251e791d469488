"""In-memory event bus implementation.

This module implements the EventBusProtocol using an in-memory dictionary-based
registry. Suitable for single-process use; a broker-backed adapter can replace
it behind the same protocol.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_type → list of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent handler execution (asyncio.gather)

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(PaymentApproved, handler.handle_payment_approved)
    >>> for event in payment.pull_domain_events():
    ...     await bus.publish(event)
"""

import asyncio
from collections import defaultdict

from sales.domain.events.base_event import DomainEvent
from sales.domain.protocols.event_bus_protocol import EventHandler
from sales.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        NOT thread-safe (single-threaded async design).

    Attributes:
        _handlers: Event class → list of async handlers.
        _logger: Logger for handler failures and event publishing.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures (warning level) and event
                publishing (debug level).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (e.g., PaymentApproved).
                Only exact type matches (no inheritance matching).
            handler: Async function to call when event is published.

        Notes:
            - No duplicate detection (same handler can be registered twice)
        """
        self._handlers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Executes all handlers concurrently. Handler exceptions are logged but
        NOT propagated to the publisher. No handlers registered is a no-op.

        Args:
            event: Domain event to publish.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        # return_exceptions=True keeps one failing handler from cancelling the rest
        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                handler_name = getattr(handlers[idx], "__name__", repr(handlers[idx]))
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=handler_name,
                    error_type=type(result).__name__,
                    error_message=str(result),
                    exc_info=result,
                )
