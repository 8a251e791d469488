"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. This approach makes error handling explicit and
testable.

Usage:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return Failure(error="Division by zero")
        return Success(value=a / b)

    result = divide(10, 2)
    match result:
        case Success(value=value):
            print(f"Result: {value}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]


class UnexpectedFailureError(RuntimeError):
    """Raised by must() when a result that had to succeed failed.

    Signals a programming error, not a runtime condition.

    Attributes:
        error: The failure value carried by the result.
    """

    def __init__(self, error: object) -> None:
        super().__init__(f"Operation expected to succeed failed: {error}")
        self.error = error


def must(result: Result[T, E]) -> T:
    """Return the value of a successful result, abort otherwise.

    Only for startup-time initialization and test fixtures, where a failure
    means the program itself is wrong. Never call it on an operation path;
    match on the Result instead.

    Args:
        result: Result expected to be a Success.

    Returns:
        The wrapped success value.

    Raises:
        UnexpectedFailureError: If result is a Failure.

    Example:
        >>> payment = must(Payment.create("order-123", Decimal("10"), PaymentMethod.PIX))
    """
    match result:
        case Success(value=value):
            return value
        case Failure(error=error):
            raise UnexpectedFailureError(error)
    raise TypeError(f"Expected Success or Failure, got {type(result).__name__}")
