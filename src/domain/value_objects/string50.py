"""String50 value object.

Names, address lines and cities are free text constrained to 1..50 chars.
"""

from dataclasses import dataclass

from src.core.constants import STRING50_MAX_LENGTH
from src.core.result import Failure, Result, Success
from src.domain.validators import create_string, create_string_opt, ensure_valid


@dataclass(frozen=True)
class String50:
    """Non-empty string of at most 50 characters.

    Attributes:
        value: The validated string.

    Raises:
        ValueError: If constructed directly with an empty or too long value.

    Example:
        >>> String50.create("City", "Springfield")
        Success(value=String50(value='Springfield'))
        >>> String50.create_opt("AddressLine2", "")
        Success(value=None)
    """

    value: str

    def __post_init__(self) -> None:
        """Reject values outside the 1..50 character range."""
        ensure_valid(create_string("String50", STRING50_MAX_LENGTH, self.value))

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, field_name: str, value: str) -> Result["String50", str]:
        """Create a String50, failing if empty or longer than 50 chars.

        Args:
            field_name: Field name reported in the failure message.
            value: Raw input.

        Returns:
            Success(String50) or Failure(message).
        """
        result = create_string(field_name, STRING50_MAX_LENGTH, value)
        if isinstance(result, Failure):
            return result
        return Success(value=cls(result.value))

    @classmethod
    def create_opt(cls, field_name: str, value: str) -> Result["String50 | None", str]:
        """Create an optional String50.

        Args:
            field_name: Field name reported in the failure message.
            value: Raw input; empty means absent.

        Returns:
            Success(None) for empty input, Success(String50) when valid,
            Failure(message) when longer than 50 chars.
        """
        result = create_string_opt(field_name, STRING50_MAX_LENGTH, value)
        if isinstance(result, Failure):
            return result
        if result.value is None:
            return Success(value=None)
        return Success(value=cls(result.value))
