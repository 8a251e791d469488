"""Console logging adapter.

Writes structured entries through a private structlog pipeline:
- Development: colored key=value lines (ConsoleRenderer)
- Testing/CI/Production: one JSON object per line

The pipeline is built per adapter with structlog.wrap_logger, so the global
structlog configuration is never touched and tests can point an adapter at
an in-memory stream.

ConsoleAdapter satisfies LoggerProtocol structurally; it does not inherit
from it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog


class ConsoleAdapter:
    """Structured logger writing to a text stream.

    Args:
        use_json (bool): JSON lines when True, human-readable when False.
        level (str): Minimum level name, case-insensitive (default INFO).
        stream (TextIO | None): Destination, stdout by default.

    Raises:
        KeyError: Unknown level name.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        stream: TextIO | None = None,
    ) -> None:
        processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.format_exc_info)
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=stream or sys.stdout),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelNamesMapping()[level.upper()]
            ),
            context_class=dict,
        )

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at ERROR, adding error_type/error_message when error is given."""
        self._logger.error(message, **_with_error(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at CRITICAL, adding error_type/error_message when error is given."""
        self._logger.critical(message, **_with_error(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose entries all carry context.

        The receiver is left unchanged; structlog bound loggers are immutable.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Alias for bind()."""
        return self.bind(**context)


def _with_error(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context
