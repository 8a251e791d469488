"""Base domain error class for Railway-Oriented Programming.

DomainError is the value every domain failure is expressed as. Domain
errors represent business rule violations and validation failures. They
flow through the system as data (Result types), not exceptions.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Frozen dataclass: sentinels are declared once and never mutated
- Equality and hashing use the error code only
- An optional cause keeps the underlying failure reachable for diagnostics
- Several failures from one operation are joined into a DomainErrorGroup

Usage:
    from sales.core.enums import ErrorCode
    from sales.core.errors import join_errors, new_error

    NOT_PENDING = new_error(ErrorCode.PAYMENT_NOT_PENDING, "payment is not pending")

    wrapped = NOT_PENDING.wrap(TimeoutError("gateway timed out"))
    assert wrapped == NOT_PENDING
    assert NOT_PENDING.matches_code(wrapped)

    group = join_errors(NOT_PENDING, None)
    assert NOT_PENDING in group
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from sales.core.enums import ErrorCode

type ErrorCause = DomainError | DomainErrorGroup | BaseException


@dataclass(frozen=True, slots=True, kw_only=True, eq=False)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code. An ErrorCode member, or a plain
            "AGGREGATE.REASON" string for aggregates outside the core enum.
            Sole equality key.
        message: Human-readable error message.
        cause: Optional underlying failure, reachable through unwrap().
            Not part of equality.
    """

    code: ErrorCode | str
    message: str
    cause: ErrorCause | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return self.render_message()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainError):
            return NotImplemented
        return self.code_value == other.code_value

    def __hash__(self) -> int:
        return hash(self.code_value)

    @property
    def code_value(self) -> str:
        """Code as a plain string, whether declared as ErrorCode or str."""
        if isinstance(self.code, ErrorCode):
            return self.code.value
        return self.code

    def render_message(self) -> str:
        """Render the error as "[code] message", plus ": cause" when wrapped.

        Returns:
            str: Human-readable rendering including the cause chain.

        Example:
            >>> str(new_error(ErrorCode.PAYMENT_NOT_PENDING, "not pending"))
            '[PAYMENT.NOT_PENDING] not pending'
        """
        if self.cause is not None:
            return f"[{self.code_value}] {self.message}: {self.cause}"
        return f"[{self.code_value}] {self.message}"

    def wrap(self, cause: ErrorCause) -> DomainError:
        """Return a copy of this error carrying cause.

        The original instance (usually a shared sentinel) is left untouched.

        Args:
            cause: Underlying failure to attach.

        Returns:
            DomainError: New error with the same code and message.
        """
        return replace(self, cause=cause)

    def unwrap(self) -> ErrorCause | None:
        """Return the wrapped cause, or None."""
        return self.cause

    def matches_code(self, target: ErrorCause | None) -> bool:
        """Check whether target is, wraps, or joins an error with this code.

        Args:
            target: Any failure value: a DomainError (possibly wrapped), a
                DomainErrorGroup, or an exception whose __cause__ chain may
                lead to a domain error.

        Returns:
            bool: True if some DomainError reachable from target has this code.
        """
        return any(
            error.code_value == self.code_value
            for error in iter_domain_errors(target)
        )


@dataclass(frozen=True, slots=True)
class DomainErrorGroup:
    """Several domain failures reported together by one operation.

    Membership is answered by code, so callers can test for every violated
    precondition from a single result:

        >>> group = join_errors(PaymentError.INVALID_ORDER_ID, PaymentError.INVALID_AMOUNT)
        >>> PaymentError.INVALID_AMOUNT in group
        True

    Attributes:
        errors: Individual failures, in evaluation order.
    """

    errors: tuple[DomainError, ...]

    def __str__(self) -> str:
        return "\n".join(error.render_message() for error in self.errors)

    def __iter__(self) -> Iterator[DomainError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __contains__(self, target: object) -> bool:
        if not isinstance(target, DomainError):
            return False
        return target.matches_code(self)

    def contains(self, target: DomainError) -> bool:
        """Check whether an error with target's code appears in the group."""
        return target.matches_code(self)

    @property
    def codes(self) -> tuple[ErrorCode | str, ...]:
        """Error codes of the member errors, in evaluation order."""
        return tuple(error.code for error in self.errors)


def new_error(code: ErrorCode | str, message: str) -> DomainError:
    """Create a DomainError with no cause.

    Use this to declare sentinel errors for domain invariant violations.
    """
    return DomainError(code=code, message=message)


def wrap_error(code: ErrorCode | str, message: str, cause: ErrorCause) -> DomainError:
    """Create a DomainError wrapping cause as the underlying failure."""
    return DomainError(code=code, message=message, cause=cause)


def join_errors(*errors: DomainError | DomainErrorGroup | None) -> DomainErrorGroup | None:
    """Combine independent check results into a single failure value.

    None entries (passed checks) are dropped and nested groups are flattened.

    Args:
        *errors: Results of individual checks.

    Returns:
        DomainErrorGroup with every failure, or None when all checks passed.

    Example:
        >>> join_errors(None, None) is None
        True
        >>> join_errors(PaymentError.NOT_PENDING, None).codes
        (<ErrorCode.PAYMENT_NOT_PENDING: 'PAYMENT.NOT_PENDING'>,)
    """
    collected: list[DomainError] = []
    for error in errors:
        if error is None:
            continue
        if isinstance(error, DomainErrorGroup):
            collected.extend(error.errors)
        else:
            collected.append(error)

    if not collected:
        return None
    return DomainErrorGroup(tuple(collected))


def iter_domain_errors(target: ErrorCause | None) -> Iterator[DomainError]:
    """Yield every DomainError reachable from target.

    Traversal follows DomainError.cause, DomainErrorGroup members, and the
    explicit __cause__ chain of exceptions. Each object is visited once.
    """
    pending: list[object] = [target]
    seen: set[int] = set()

    while pending:
        current = pending.pop()
        if current is None or id(current) in seen:
            continue
        seen.add(id(current))

        if isinstance(current, DomainError):
            yield current
            pending.append(current.cause)
        elif isinstance(current, DomainErrorGroup):
            pending.extend(reversed(current.errors))
        elif isinstance(current, BaseException):
            pending.append(current.__cause__)
