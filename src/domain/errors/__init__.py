"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import PlaceOrderError, PricingError, ValidationError
"""

from src.domain.errors.order_error import OrderError
from src.domain.errors.place_order_error import (
    PlaceOrderError,
    PricingError,
    RemoteServiceError,
    ServiceInfo,
    ValidationError,
)

__all__ = [
    "OrderError",
    "PlaceOrderError",
    "PricingError",
    "RemoteServiceError",
    "ServiceInfo",
    "ValidationError",
]
