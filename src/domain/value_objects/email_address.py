"""EmailAddress value object.

Immutable value object holding a customer's email address.
"""

from dataclasses import dataclass

from src.core.constants import EMAIL_ADDRESS_PATTERN
from src.core.result import Failure, Result, Success
from src.domain.validators import create_like, ensure_valid


@dataclass(frozen=True)
class EmailAddress:
    """Email address with a minimal format check.

    Only the presence of an "@" between non-empty parts is enforced;
    deliverability is the acknowledgement sender's concern.

    Attributes:
        value: The email address string.

    Raises:
        ValueError: If constructed directly with an invalid address.

    Example:
        >>> EmailAddress.create("EmailAddress", "jane@example.com")
        Success(value=EmailAddress('jane@example.com'))
        >>> EmailAddress.create("EmailAddress", "jane")
        Failure(error="EmailAddress: jane must match pattern: '.+@.+'")
    """

    value: str

    def __post_init__(self) -> None:
        """Reject values that do not look like an email address."""
        ensure_valid(create_like("EmailAddress", EMAIL_ADDRESS_PATTERN, self.value))

    def __str__(self) -> str:
        """Return email address as string.

        Returns:
            str: The email address.
        """
        return self.value

    def __repr__(self) -> str:
        """Return repr for debugging.

        Returns:
            str: String representation of EmailAddress object.
        """
        return f"EmailAddress('{self.value}')"

    @classmethod
    def create(cls, field_name: str, value: str) -> Result["EmailAddress", str]:
        """Create an EmailAddress, failing if empty or missing an "@".

        Args:
            field_name: Field name reported in the failure message.
            value: Raw input.

        Returns:
            Success(EmailAddress) or Failure(message).
        """
        result = create_like(field_name, EMAIL_ADDRESS_PATTERN, value)
        if isinstance(result, Failure):
            return result
        return Success(value=cls(result.value))
