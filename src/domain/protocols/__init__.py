"""Domain protocols (ports).

Interfaces of the collaborators the order workflow depends on. The
infrastructure layer provides the adapters.
"""

from src.domain.protocols.acknowledgement_protocol import (
    CreateAcknowledgementLetter,
    SendAcknowledgement,
)
from src.domain.protocols.address_checker_protocol import CheckAddressExists
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.product_catalog_protocol import (
    CheckProductExists,
    GetProductPrice,
)

__all__ = [
    "CheckAddressExists",
    "CheckProductExists",
    "CreateAcknowledgementLetter",
    "GetProductPrice",
    "LoggerProtocol",
    "SendAcknowledgement",
]
