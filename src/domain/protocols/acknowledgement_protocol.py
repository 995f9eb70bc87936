"""Order acknowledgement ports.

Rendering the letter and delivering it are separate collaborators, both
synchronous from the workflow's point of view.
"""

from typing import Protocol

from src.domain.entities import OrderAcknowledgement, PricedOrder
from src.domain.enums import SendResult
from src.domain.value_objects import HtmlString


class CreateAcknowledgementLetter(Protocol):
    """Letter renderer (port)."""

    def __call__(self, priced_order: PricedOrder) -> HtmlString:
        """Render the acknowledgement letter for a priced order."""
        ...


class SendAcknowledgement(Protocol):
    """Acknowledgement delivery (port).

    Email, print or anything else; the workflow only sees the outcome.
    """

    def __call__(self, acknowledgement: OrderAcknowledgement) -> SendResult:
        """Deliver an acknowledgement.

        Args:
            acknowledgement: Rendered letter and destination address.

        Returns:
            SendResult.SENT if delivered, SendResult.NOT_SENT otherwise.
        """
        ...
