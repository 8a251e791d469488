"""Logging event handler for payment domain events.

Log Levels:
    - INFO: PaymentApproved, PaymentRefused (normal gateway outcomes)

Structured Fields:
    - event_id: UUID for event correlation and deduplication
    - occurred_at: ISO 8601 timestamp (UTC)
    - payment_id, order_id: Entity references
    - amount: Decimal rendered as string (no float rounding)
    - transaction_code: Gateway transaction code

Usage:
    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> event_bus.subscribe(PaymentApproved, handler.handle_payment_approved)
    >>> event_bus.subscribe(PaymentRefused, handler.handle_payment_refused)
"""

from sales.domain.events.payment_events import PaymentApproved, PaymentRefused
from sales.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of payment events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle_payment_approved(self, event: PaymentApproved) -> None:
        """Log an authorized payment (INFO level)."""
        self._logger.info(
            "payment_approved",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            payment_id=event.payment_id,
            order_id=event.order_id,
            amount=str(event.amount),
            transaction_code=event.transaction_code,
        )

    async def handle_payment_refused(self, event: PaymentRefused) -> None:
        """Log a refused payment (INFO level)."""
        self._logger.info(
            "payment_refused",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            payment_id=event.payment_id,
            order_id=event.order_id,
            amount=str(event.amount),
            transaction_code=event.transaction_code,
        )
