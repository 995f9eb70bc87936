"""Outcome of an acknowledgement delivery attempt."""

from enum import Enum


class SendResult(str, Enum):
    """Whether the acknowledgement reached the customer.

    NOT_SENT is a normal outcome (e.g. the customer opted out of
    notifications), not an error.
    """

    SENT = "sent"
    NOT_SENT = "not_sent"
