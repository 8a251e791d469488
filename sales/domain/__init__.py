"""Domain layer - Pure business logic.

This layer contains the core business entities, enums, error constants,
protocols (ports), and domain events. The domain layer has NO dependencies
on any framework or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (mutable, have identity)
- enums/: Closed sets of domain values (payment status, payment method)
- errors/: Sentinel DomainError constants per aggregate
- events/: Domain events (things that happened in the domain)
- protocols/: Domain protocols (event bus, logger)
"""
