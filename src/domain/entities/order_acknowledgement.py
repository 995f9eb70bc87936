"""Order acknowledgement handed to the acknowledgement sender."""

from dataclasses import dataclass

from src.domain.value_objects import EmailAddress, HtmlString


@dataclass(frozen=True, kw_only=True)
class OrderAcknowledgement:
    """Rendered acknowledgement and where to send it.

    Attributes:
        email_address: Customer's email address.
        letter: Rendered acknowledgement letter.
    """

    email_address: EmailAddress
    letter: HtmlString
