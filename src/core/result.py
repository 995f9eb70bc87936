"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. Every stage of the order workflow returns a Result,
so a failure is a value the caller inspects rather than something it catches.

Usage:
    def parse_quantity(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Failure(error=f"Not a number: {raw}")
        return Success(value=int(raw))

    match parse_quantity("12"):
        case Success(value=quantity):
            print(f"Quantity: {quantity}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped item type


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
Result: TypeAlias = Success[T] | Failure[E]


def traverse(items: Iterable[T], fn: Callable[[T], "Result[U, E]"]) -> "Result[list[U], E]":
    """Apply a fallible function to each item, stopping at the first failure.

    Items are processed left to right. As soon as ``fn`` returns a Failure,
    that Failure is returned unchanged and the remaining items are never
    passed to ``fn``.

    Args:
        items: Inputs to transform.
        fn: Fallible transformation applied to each input.

    Returns:
        Success(list of transformed values) if every call succeeded,
        otherwise the first Failure.

    Example:
        >>> traverse(["1", "2"], parse_quantity)
        Success(value=[1, 2])
        >>> traverse(["1", "x", "3"], parse_quantity)
        Failure(error='Not a number: x')
    """
    values: list[U] = []
    for item in items:
        result = fn(item)
        if isinstance(result, Failure):
            return result
        values.append(result.value)
    return Success(value=values)
