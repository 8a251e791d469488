"""Container module - Centralized dependency injection.

Re-exports the factory functions from submodules:

    from sales.core.container import get_event_bus, get_logger

The container is organized into modules by concern:
- infrastructure: Core services (logging)
- events: Event bus and subscriptions
"""

# Infrastructure services
from sales.core.container.infrastructure import get_logger

# Event bus
from sales.core.container.events import get_event_bus

__all__ = [
    "get_event_bus",
    "get_logger",
]
