"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.
Enums are centralized here for discoverability and maintainability.

Available Enums:
    - AddressValidationError: Why the address service rejected an address
    - SendResult: Whether an acknowledgement was delivered
"""

from src.domain.enums.address_validation_error import AddressValidationError
from src.domain.enums.send_result import SendResult

__all__ = ["AddressValidationError", "SendResult"]
