"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from sales.domain.protocols import EventBusProtocol, LoggerProtocol
"""

from sales.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from sales.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
]
