"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Pricing errors (PRICING_*, *_OUT_OF_BOUNDS)
- Remote service errors (REMOTE_SERVICE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    ADDRESS_NOT_FOUND = "address_not_found"
    ADDRESS_INVALID_FORMAT = "address_invalid_format"
    PRODUCT_NOT_FOUND = "product_not_found"

    # Pricing errors
    PRICING_FAILED = "pricing_failed"

    # Remote service errors
    REMOTE_SERVICE_FAILED = "remote_service_failed"
    REMOTE_SERVICE_TIMEOUT = "remote_service_timeout"
