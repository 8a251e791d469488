"""Event bus adapters and event handlers."""

from sales.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
