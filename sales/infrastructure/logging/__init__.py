"""Structured logging adapters (structlog)."""

from sales.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
