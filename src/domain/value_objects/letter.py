"""Acknowledgement letter payloads.

The workflow never looks inside a letter: it receives one from the letter
renderer and hands it to the acknowledgement sender unchanged.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class HtmlString:
    """Rendered HTML document.

    Attributes:
        value: The HTML markup.
    """

    value: str

    def __str__(self) -> str:
        return self.value
