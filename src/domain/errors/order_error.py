"""Order workflow error messages.

Defines the fixed messages used when a collaborator rejects part of an order.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.domain.errors import OrderError

    message = OrderError.for_address_error(AddressValidationError.INVALID_FORMAT)
"""

from src.domain.enums import AddressValidationError


class OrderError:
    """Order error message constants.

    These are NOT exceptions - they are error value constants
    used in railway-oriented programming pattern.
    """

    # -------------------------------------------------------------------------
    # Address Verification Errors
    # -------------------------------------------------------------------------

    ADDRESS_NOT_FOUND = "Address Not Found"
    """The address verification service does not know the address."""

    INVALID_FORMAT = "Invalid Format"
    """The address verification service could not parse the address."""

    # -------------------------------------------------------------------------
    # Catalog Errors
    # -------------------------------------------------------------------------

    UNKNOWN_PRODUCT_TEMPLATE = "Invalid: {code}"
    """Product code is well formed but not in the catalog."""

    @classmethod
    def for_address_error(cls, error: AddressValidationError) -> str:
        """Return the fixed message for an address verification failure."""
        match error:
            case AddressValidationError.ADDRESS_NOT_FOUND:
                return cls.ADDRESS_NOT_FOUND
            case AddressValidationError.INVALID_FORMAT:
                return cls.INVALID_FORMAT

    @classmethod
    def unknown_product(cls, code: str) -> str:
        """Return the message for a product code missing from the catalog."""
        return cls.UNKNOWN_PRODUCT_TEMPLATE.format(code=code)
