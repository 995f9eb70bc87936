"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_place_order_handler, get_logger

The container is organized into modules:
- infrastructure: Settings, logging and the workflow's collaborators
- order_handlers: Command handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    DEFAULT_PRODUCT_PRICES,
    close_address_checker,
    get_acknowledgement_sender,
    get_address_checker,
    get_letter_renderer,
    get_logger,
    get_product_catalog,
    get_settings,
)

# Order handlers
from src.core.container.order_handlers import get_place_order_handler

__all__ = [
    "DEFAULT_PRODUCT_PRICES",
    "close_address_checker",
    "get_acknowledgement_sender",
    "get_address_checker",
    "get_letter_renderer",
    "get_logger",
    "get_place_order_handler",
    "get_product_catalog",
    "get_settings",
]
