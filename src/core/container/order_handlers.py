"""Order handler dependency factories.

Wires the PlaceOrder handler to the application-scoped collaborators from
``src.core.container.infrastructure``.
"""

from typing import TYPE_CHECKING

from src.core.container.infrastructure import (
    get_acknowledgement_sender,
    get_address_checker,
    get_letter_renderer,
    get_logger,
    get_product_catalog,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.place_order_handler import (
        PlaceOrderHandler,
    )


# ============================================================================
# Order Handler Factories
# ============================================================================


def get_place_order_handler() -> "PlaceOrderHandler":
    """Get PlaceOrder command handler.

    Creates a new handler instance per call with all required dependencies:
    - Product catalog (app-scoped singleton, both catalog ports)
    - Address checker (app-scoped singleton)
    - Letter renderer and acknowledgement sender (app-scoped singletons)
    - Logger (app-scoped singleton)

    Returns:
        PlaceOrderHandler instance.

    Usage:
        handler = get_place_order_handler()
        result = await handler.handle(PlaceOrder(order=unvalidated_order))
    """
    from src.application.commands.handlers.place_order_handler import (
        PlaceOrderHandler,
    )

    catalog = get_product_catalog()

    return PlaceOrderHandler(
        check_product_exists=catalog.product_exists,
        check_address_exists=get_address_checker(),
        get_product_price=catalog.get_product_price,
        create_acknowledgement_letter=get_letter_renderer(),
        send_acknowledgement=get_acknowledgement_sender(),
        logger=get_logger(),
    )
