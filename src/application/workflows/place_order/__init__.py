"""Place order workflow.

Stages, each consuming the previous stage's output type:
- validation: UnvalidatedOrder -> ValidatedOrder
- pricing: ValidatedOrder -> PricedOrder
- acknowledgement: PricedOrder -> events
- workflow: the composed entry point ``place_order``
"""

from src.application.workflows.place_order.acknowledgement import (
    acknowledge_order,
    create_billing_event,
    create_events,
    create_order_placed_event,
)
from src.application.workflows.place_order.pricing import (
    price_order,
    to_priced_order_line,
)
from src.application.workflows.place_order.validation import (
    check_address,
    to_address,
    to_customer_info,
    to_order_id,
    to_order_line_id,
    to_order_quantity,
    to_product_code,
    to_validated_order_line,
    validate_order,
)
from src.application.workflows.place_order.workflow import place_order

__all__ = [
    "acknowledge_order",
    "check_address",
    "create_billing_event",
    "create_events",
    "create_order_placed_event",
    "place_order",
    "price_order",
    "to_address",
    "to_customer_info",
    "to_order_id",
    "to_order_line_id",
    "to_order_quantity",
    "to_priced_order_line",
    "to_product_code",
    "to_validated_order_line",
    "validate_order",
]
