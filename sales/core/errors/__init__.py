"""Core errors package.

Exports the domain error value types and their helpers.

Usage:
    from sales.core.errors import DomainError, DomainErrorGroup, join_errors
"""

from sales.core.errors.domain_error import (
    DomainError,
    DomainErrorGroup,
    ErrorCause,
    iter_domain_errors,
    join_errors,
    new_error,
    wrap_error,
)

__all__ = [
    "DomainError",
    "DomainErrorGroup",
    "ErrorCause",
    "iter_domain_errors",
    "join_errors",
    "new_error",
    "wrap_error",
]
