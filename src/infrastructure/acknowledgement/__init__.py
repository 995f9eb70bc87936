"""Acknowledgement adapters.

- HtmlLetterRenderer: renders the acknowledgement letter as HTML
- StubAcknowledgementSender: logs and records instead of emailing
"""

from src.infrastructure.acknowledgement.html_letter_renderer import HtmlLetterRenderer
from src.infrastructure.acknowledgement.stub_acknowledgement_sender import (
    StubAcknowledgementSender,
)

__all__ = [
    "HtmlLetterRenderer",
    "StubAcknowledgementSender",
]
