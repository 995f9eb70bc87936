"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Bounds: Limits enforced by the constrained value objects
- Patterns: Regular expressions for pattern-constrained strings
- Timeouts: Default timeouts for external service calls
- Limits: Truncation and safety limits

Example:
    >>> from src.core.constants import STRING50_MAX_LENGTH
    >>> String50.create("City", "x" * (STRING50_MAX_LENGTH + 1))
    Failure(error='City must not be more than 50 chars')
"""

# =============================================================================
# Bounds
# =============================================================================

STRING50_MAX_LENGTH: int = 50
"""Maximum length of names, address lines, cities and identifiers."""

UNIT_QUANTITY_MIN: int = 1
UNIT_QUANTITY_MAX: int = 1000
"""Widgets are sold by unit, 1 to 1000 per order line."""

KILOGRAM_QUANTITY_MIN: float = 0.05
KILOGRAM_QUANTITY_MAX: float = 100.0
"""Gizmos are sold by weight, 0.05kg to 100kg per order line."""

PRICE_MIN: float = 0.0
PRICE_MAX: float = 100.0
"""Bounds for a unit price and for a single line price."""

BILLING_AMOUNT_MIN: float = 0.0
BILLING_AMOUNT_MAX: float = 10000.0
"""Bounds for the total amount billed for one order."""


# =============================================================================
# Patterns
# =============================================================================

EMAIL_ADDRESS_PATTERN: str = r".+@.+"
ZIP_CODE_PATTERN: str = r"\d{5}"
WIDGET_CODE_PATTERN: str = r"W\d{4}"
GIZMO_CODE_PATTERN: str = r"G\d{3}"

WIDGET_CODE_PREFIX: str = "W"
GIZMO_CODE_PREFIX: str = "G"


# =============================================================================
# Timeouts
# =============================================================================

REMOTE_SERVICE_TIMEOUT_DEFAULT: float = 10.0
"""Default timeout for the address verification service in seconds."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length of a remote response body kept in error details."""
