"""Centralized constrained-value rules (DRY principle).

All validation logic defined once, reused by every value object factory.
Rules are pure functions: given a field name (used in the message) and a raw
value they return Success(raw value) or Failure(human-readable message).
They never raise and hold no state, so they are safe to call concurrently.

Message formats:
    "<Field> must not be empty"
    "<Field> must not be more than <max> chars"
    "<Field>: Must not be less than <min>"
    "<Field>: Must not be greater than <max>"
    "<Field>: <raw> must match pattern: '<pattern>'"
"""

import math
import re
from typing import TypeVar

from src.core.result import Failure, Result, Success

T = TypeVar("T")


def create_string(field_name: str, max_len: int, value: str) -> Result[str, str]:
    """Validate a non-empty string of at most ``max_len`` characters.

    Args:
        field_name: Field name reported in the failure message.
        max_len: Maximum allowed length (inclusive).
        value: Raw input.

    Returns:
        Success(value) unchanged, or Failure(message).

    Example:
        >>> create_string("City", 50, "Springfield")
        Success(value='Springfield')
        >>> create_string("City", 50, "")
        Failure(error='City must not be empty')
    """
    if not value:
        return Failure(error=f"{field_name} must not be empty")
    if len(value) > max_len:
        return Failure(error=f"{field_name} must not be more than {max_len} chars")
    return Success(value=value)


def create_string_opt(
    field_name: str, max_len: int, value: str
) -> Result[str | None, str]:
    """Validate an optional string of at most ``max_len`` characters.

    An empty input is not an error: it means the value is absent.

    Args:
        field_name: Field name reported in the failure message.
        max_len: Maximum allowed length (inclusive).
        value: Raw input.

    Returns:
        Success(None) for empty input, Success(value) when within bounds,
        otherwise Failure(message).
    """
    if not value:
        return Success(value=None)
    if len(value) > max_len:
        return Failure(error=f"{field_name} must not be more than {max_len} chars")
    return Success(value=value)


def create_int(field_name: str, min_val: int, max_val: int, value: int) -> Result[int, str]:
    """Validate an integer within inclusive bounds.

    Args:
        field_name: Field name reported in the failure message.
        min_val: Smallest allowed value.
        max_val: Largest allowed value.
        value: Raw input.

    Returns:
        Success(value) unchanged, or Failure(message).
    """
    if value < min_val:
        return Failure(error=f"{field_name}: Must not be less than {min_val}")
    if value > max_val:
        return Failure(error=f"{field_name}: Must not be greater than {max_val}")
    return Success(value=value)


def create_decimal(
    field_name: str, min_val: float, max_val: float, value: float
) -> Result[float, str]:
    """Validate a float within inclusive bounds.

    NaN compares false against both bounds, so it is rejected explicitly.

    Args:
        field_name: Field name reported in the failure message.
        min_val: Smallest allowed value.
        max_val: Largest allowed value.
        value: Raw input.

    Returns:
        Success(value) unchanged, or Failure(message).

    Example:
        >>> create_decimal("Price", 0.0, 100.0, 120.0)
        Failure(error='Price: Must not be greater than 100.0')
    """
    if math.isnan(value):
        return Failure(error=f"{field_name}: Must be a number")
    if value < min_val:
        return Failure(error=f"{field_name}: Must not be less than {float(min_val)}")
    if value > max_val:
        return Failure(error=f"{field_name}: Must not be greater than {float(max_val)}")
    return Success(value=value)


def create_like(field_name: str, pattern: str, value: str) -> Result[str, str]:
    """Validate a non-empty string that fully matches ``pattern``.

    Args:
        field_name: Field name reported in the failure message.
        pattern: Regular expression the whole input must match. Matched
            with re.ASCII, so digit classes match 0-9 only.
        value: Raw input.

    Returns:
        Success(value) unchanged, or Failure(message).
    """
    if not value:
        return Failure(error=f"{field_name} must not be empty")
    if re.fullmatch(pattern, value, flags=re.ASCII) is None:
        return Failure(error=f"{field_name}: {value} must match pattern: '{pattern}'")
    return Success(value=value)


def ensure_valid(result: Result[T, str]) -> T:
    """Unwrap a rule result inside a value object's ``__post_init__``.

    Value objects call this so that an instance violating its invariant can
    never exist, even when the class is called directly instead of through
    its ``create`` factory.

    Args:
        result: Outcome of one of the rule functions above.

    Returns:
        The validated value.

    Raises:
        ValueError: If the rule failed.
    """
    if isinstance(result, Failure):
        raise ValueError(result.error)
    return result.value
