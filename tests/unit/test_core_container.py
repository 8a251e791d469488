"""Unit tests for container factories (get_logger, get_event_bus).

Tests cover:
- Logger adapter selection per environment
- Log level taken from settings
- Event bus adapter selection and handler wiring
- Singleton caching (lru_cache)
"""

import os
from unittest.mock import patch

import pytest

from sales.core.container import get_event_bus, get_logger
from sales.domain.events.base_event import DomainEvent
from sales.domain.events.payment_events import PaymentApproved, PaymentRefused
from sales.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from sales.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger() adapter selection."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            ("development", False),
            ("testing", True),
            ("ci", True),
            ("production", True),
        ],
    )
    def test_renderer_follows_environment(self, environment, use_json):
        """Test JSON output everywhere except development."""
        with patch.dict(os.environ, {"ENVIRONMENT": environment}, clear=True):
            with patch(
                "sales.infrastructure.logging.console_adapter.ConsoleAdapter",
                wraps=ConsoleAdapter,
            ) as adapter_cls:
                logger = get_logger()

        adapter_cls.assert_called_once_with(use_json=use_json, level="INFO")
        assert isinstance(logger, ConsoleAdapter)

    def test_level_follows_debug_flag(self):
        """Test debug mode lowers the logger level to DEBUG."""
        with patch.dict(os.environ, {"DEBUG": "true", "LOG_LEVEL": "ERROR"}, clear=True):
            with patch(
                "sales.infrastructure.logging.console_adapter.ConsoleAdapter",
                wraps=ConsoleAdapter,
            ) as adapter_cls:
                get_logger()

        adapter_cls.assert_called_once_with(use_json=False, level="DEBUG")

    def test_logger_is_cached(self):
        """Test the logger is an application-scoped singleton."""
        with patch.dict(os.environ, {}, clear=True):
            assert get_logger() is get_logger()


@pytest.mark.unit
class TestGetEventBus:
    """Test get_event_bus() construction and wiring."""

    def test_in_memory_bus_is_default(self):
        """Test the default adapter is InMemoryEventBus."""
        with patch.dict(os.environ, {}, clear=True):
            event_bus = get_event_bus()

        assert isinstance(event_bus, InMemoryEventBus)

    def test_every_payment_event_has_a_handler(self):
        """Test each DomainEvent subclass has at least one subscriber."""
        with patch.dict(os.environ, {}, clear=True):
            event_bus = get_event_bus()

        event_classes = [
            cls
            for cls in DomainEvent.__subclasses__()
            if cls.__module__.startswith("sales.")
        ]

        assert {PaymentApproved, PaymentRefused} <= set(event_classes)
        for event_class in event_classes:
            handlers = event_bus._handlers.get(event_class, [])
            assert len(handlers) >= 1, event_class.__name__

    def test_unsupported_bus_type_raises(self):
        """Test an unknown EVENT_BUS_TYPE fails fast."""
        with patch.dict(os.environ, {"EVENT_BUS_TYPE": "kafka"}, clear=True):
            with pytest.raises(ValueError, match="Unsupported EVENT_BUS_TYPE: kafka"):
                get_event_bus()

    def test_event_bus_is_cached(self):
        """Test the event bus is an application-scoped singleton."""
        with patch.dict(os.environ, {}, clear=True):
            assert get_event_bus() is get_event_bus()
