"""ZipCode value object."""

from dataclasses import dataclass

from src.core.constants import ZIP_CODE_PATTERN
from src.core.result import Failure, Result, Success
from src.domain.validators import create_like, ensure_valid


@dataclass(frozen=True)
class ZipCode:
    """Zip code made of exactly five digits.

    Attributes:
        value: The zip code string.
    """

    value: str

    def __post_init__(self) -> None:
        ensure_valid(create_like("Zipcode", ZIP_CODE_PATTERN, self.value))

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, field_name: str, value: str) -> Result["ZipCode", str]:
        """Create a ZipCode, failing if empty or not five digits."""
        result = create_like(field_name, ZIP_CODE_PATTERN, value)
        if isinstance(result, Failure):
            return result
        return Success(value=cls(result.value))
