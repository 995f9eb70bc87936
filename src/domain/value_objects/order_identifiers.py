"""Order and order line identifiers.

Both are opaque caller-supplied strings constrained to 1..50 chars.
"""

from dataclasses import dataclass

from src.core.constants import STRING50_MAX_LENGTH
from src.core.result import Failure, Result, Success
from src.domain.validators import create_string, ensure_valid


@dataclass(frozen=True)
class OrderId:
    """Identifier of an order.

    Attributes:
        value: The identifier string.
    """

    value: str

    def __post_init__(self) -> None:
        ensure_valid(create_string("OrderId", STRING50_MAX_LENGTH, self.value))

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, field_name: str, value: str) -> Result["OrderId", str]:
        """Create an OrderId, failing if empty or longer than 50 chars."""
        result = create_string(field_name, STRING50_MAX_LENGTH, value)
        if isinstance(result, Failure):
            return result
        return Success(value=cls(result.value))


@dataclass(frozen=True)
class OrderLineId:
    """Identifier of a line within an order.

    Attributes:
        value: The identifier string.
    """

    value: str

    def __post_init__(self) -> None:
        ensure_valid(create_string("OrderLineId", STRING50_MAX_LENGTH, self.value))

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, field_name: str, value: str) -> Result["OrderLineId", str]:
        """Create an OrderLineId, failing if empty or longer than 50 chars."""
        result = create_string(field_name, STRING50_MAX_LENGTH, value)
        if isinstance(result, Failure):
            return result
        return Success(value=cls(result.value))
