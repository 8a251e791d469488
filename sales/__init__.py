"""Sales domain model.

Layers:
- core/: Cross-cutting primitives (errors, results, guards, config, container)
- domain/: Pure business logic (entities, enums, errors, events, protocols)
- infrastructure/: Adapters (structured logging, in-memory event bus)
"""
