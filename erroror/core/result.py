"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. A Result is either a Success carrying a value or a
Failure carrying one or more Error values.

Usage:
    def find_user(user_id: int) -> Result[User]:
        user = users.get(user_id)
        if user is None:
            return Failure.of(Error.not_found("User.NotFound", "User not found"))
        return Success(value=user)

    match find_user(7):
        case Success(value=user):
            print(f"Found: {user}")
        case Failure(errors=errors):
            print(f"Error: {errors[0]}")
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from erroror.core.errors import Error

T = TypeVar("T")  # Success type
U = TypeVar("U")  # Mapped success type
R = TypeVar("R")  # Match return type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure:
    """Represents a failed operation result.

    Attributes:
        errors: The errors that occurred, in order. Never empty.
    """

    errors: tuple[Error, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise ValueError("Failure requires at least one error")

    @classmethod
    def of(cls, error: Error, *more: Error) -> Self:
        """Build a Failure from one or more errors."""
        return cls(errors=(error, *more))

    @property
    def first_error(self) -> Error:
        """The first error that occurred."""
        return self.errors[0]


# Type alias for Result union
type Result[T] = Success[T] | Failure


def is_success(result: Result[T]) -> bool:
    return isinstance(result, Success)


def is_failure(result: Result[T]) -> bool:
    return isinstance(result, Failure)


def map_result(result: Result[T], fn: Callable[[T], U]) -> Result[U]:
    """Transform the success value, passing failures through unchanged."""
    if isinstance(result, Success):
        return Success(value=fn(result.value))
    return result


def bind_result(result: Result[T], fn: Callable[[T], Result[U]]) -> Result[U]:
    """Chain a fallible step onto a success, short-circuiting on failure."""
    if isinstance(result, Success):
        return fn(result.value)
    return result


def or_else(result: Result[T], fn: Callable[[tuple[Error, ...]], T]) -> Success[T]:
    """Recover from a failure by computing a value from its errors."""
    if isinstance(result, Success):
        return result
    return Success(value=fn(result.errors))


def value_or(result: Result[T], default: T) -> T:
    if isinstance(result, Success):
        return result.value
    return default


def match_result(
    result: Result[T],
    on_success: Callable[[T], R],
    on_failure: Callable[[tuple[Error, ...]], R],
) -> R:
    """Fold a result into a single value.

    Args:
        result: Result to fold.
        on_success: Called with the value of a Success.
        on_failure: Called with the errors of a Failure.

    Returns:
        Whatever the selected callback returns.
    """
    if isinstance(result, Success):
        return on_success(result.value)
    return on_failure(result.errors)


def collect(results: Iterable[Result[T]]) -> Result[list[T]]:
    """Combine many results into one.

    Returns Success with every value when all results succeeded, otherwise a
    single Failure holding every error of every failed result, in order.
    """
    values: list[T] = []
    errors: list[Error] = []
    for result in results:
        if isinstance(result, Success):
            values.append(result.value)
        else:
            errors.extend(result.errors)
    if errors:
        return Failure(errors=tuple(errors))
    return Success(value=values)
