"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from sales.domain.entities.payment import Payment

__all__ = [
    "Payment",
]
