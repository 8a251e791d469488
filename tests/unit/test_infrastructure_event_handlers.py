"""Unit tests for LoggingEventHandler.

Tests cover:
- payment_approved / payment_refused log entries (INFO level)
- Structured fields (ids, ISO timestamp, amount as string)
- Wiring through the event bus

Architecture:
- Unit tests with mocked logger
"""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from sales.domain.events.payment_events import PaymentApproved, PaymentRefused
from sales.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)
from sales.infrastructure.events.in_memory_event_bus import InMemoryEventBus

OCCURRED_AT = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test payment event logging."""

    @pytest.mark.asyncio
    async def test_handle_payment_approved_logs_info(self):
        """Test approval is logged at INFO with all structured fields."""
        # Arrange
        mock_logger = MagicMock()
        handler = LoggingEventHandler(logger=mock_logger)
        event = PaymentApproved(
            payment_id="payment-1",
            order_id="order-123",
            amount=Decimal("100.00"),
            transaction_code="TXN-123",
            occurred_at=OCCURRED_AT,
        )

        # Act
        await handler.handle_payment_approved(event)

        # Assert
        mock_logger.info.assert_called_once_with(
            "payment_approved",
            event_id=str(event.event_id),
            occurred_at="2026-03-01T12:00:00+00:00",
            payment_id="payment-1",
            order_id="order-123",
            amount="100.00",
            transaction_code="TXN-123",
        )

    @pytest.mark.asyncio
    async def test_handle_payment_refused_logs_info(self):
        """Test refusal is logged at INFO."""
        # Arrange
        mock_logger = MagicMock()
        handler = LoggingEventHandler(logger=mock_logger)
        event = PaymentRefused(
            payment_id="payment-2",
            order_id="order-456",
            amount=Decimal("12.5"),
            transaction_code="TXN-456",
            occurred_at=OCCURRED_AT,
        )

        # Act
        await handler.handle_payment_refused(event)

        # Assert
        mock_logger.info.assert_called_once()
        args, kwargs = mock_logger.info.call_args
        assert args == ("payment_refused",)
        assert kwargs["payment_id"] == "payment-2"
        assert kwargs["amount"] == "12.5"
        assert kwargs["transaction_code"] == "TXN-456"
        mock_logger.warning.assert_not_called()

    @pytest.mark.asyncio
    async def test_handler_runs_through_event_bus(self):
        """Test the handler receives events published on the bus."""
        # Arrange
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        handler = LoggingEventHandler(logger=mock_logger)
        event_bus.subscribe(PaymentApproved, handler.handle_payment_approved)

        # Act
        await event_bus.publish(
            PaymentApproved(
                payment_id="payment-1",
                order_id="order-123",
                amount=Decimal("1"),
                transaction_code="TXN-1",
            )
        )

        # Assert
        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args.args[0] == "payment_approved"
