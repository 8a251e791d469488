"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from sales.core.config import get_settings
from sales.core.enums import Environment

if TYPE_CHECKING:
    from sales.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    The minimum level comes from Settings.effective_log_level.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from sales.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.environment in {
        Environment.TESTING,
        Environment.CI,
        Environment.PRODUCTION,
    }
    return ConsoleAdapter(use_json=use_json, level=settings.effective_log_level)
