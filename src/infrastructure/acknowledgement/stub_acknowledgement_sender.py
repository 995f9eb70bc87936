"""Logging acknowledgement sender.

Stands in for an email gateway: the acknowledgement is logged and kept in an
outbox instead of being delivered. Addresses listed as suppressed are not
sent to, which exercises the NOT_SENT path of the workflow.
"""

from collections.abc import Iterable

from src.domain.entities import OrderAcknowledgement
from src.domain.enums import SendResult
from src.domain.protocols import LoggerProtocol


class StubAcknowledgementSender:
    """SendAcknowledgement implementation that records instead of sending.

    Attributes:
        outbox: Acknowledgements accepted for sending, in order.
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        *,
        suppressed_emails: Iterable[str] = (),
    ) -> None:
        """Initialize the sender.

        Args:
            logger: Structured logger.
            suppressed_emails: Email addresses that must not be contacted.
        """
        self._logger = logger
        self._suppressed_emails = frozenset(email.lower() for email in suppressed_emails)
        self.outbox: list[OrderAcknowledgement] = []

    def __call__(self, acknowledgement: OrderAcknowledgement) -> SendResult:
        email = acknowledgement.email_address.value
        if email.lower() in self._suppressed_emails:
            self._logger.warning("acknowledgement_not_sent", email=email, reason="suppressed")
            return SendResult.NOT_SENT

        self.outbox.append(acknowledgement)
        self._logger.info(
            "acknowledgement_sent",
            email=email,
            letter_length=len(acknowledgement.letter.value),
        )
        return SendResult.SENT
