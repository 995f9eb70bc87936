"""Address verification outcomes.

The address verification service rejects an address for exactly one of two
reasons. The validation stage turns each into a fixed validation message.

Usage:
    from src.domain.enums import AddressValidationError

    return Failure(error=AddressValidationError.ADDRESS_NOT_FOUND)
"""

from enum import Enum


class AddressValidationError(str, Enum):
    """Reasons the address verification service rejects an address.

    String Enum:
        Inherits from str for easy serialization in logs and payloads.
    """

    INVALID_FORMAT = "invalid_format"
    ADDRESS_NOT_FOUND = "address_not_found"
