"""Customer identity value objects."""

from dataclasses import dataclass

from src.domain.value_objects.email_address import EmailAddress
from src.domain.value_objects.string50 import String50


@dataclass(frozen=True, kw_only=True)
class PersonName:
    """Customer's first and last name.

    Attributes:
        first_name: Given name.
        last_name: Family name.
    """

    first_name: String50
    last_name: String50

    @property
    def full_name(self) -> str:
        """Return "First Last" for letters and logs."""
        return f"{self.first_name.value} {self.last_name.value}"


@dataclass(frozen=True, kw_only=True)
class CustomerInfo:
    """Who placed the order and where to acknowledge it.

    Attributes:
        name: Customer's name.
        email_address: Address the acknowledgement is sent to.
    """

    name: PersonName
    email_address: EmailAddress
