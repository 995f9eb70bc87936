"""Validated order.

Output of the validation stage. Every field is a constrained value object,
both addresses were accepted by the address verification service and every
product code exists in the catalog.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Frozen snapshot, consumed read-only by the pricing stage
"""

from dataclasses import dataclass

from src.domain.value_objects import (
    Address,
    CustomerInfo,
    OrderId,
    OrderLineId,
    OrderQuantity,
    ProductCode,
)


@dataclass(frozen=True, kw_only=True)
class ValidatedOrderLine:
    """Order line with validated identifier, product and quantity.

    Attributes:
        orderline_id: Line identifier.
        product_code: Catalog product (widget or gizmo).
        quantity: Units for widgets, kilograms for gizmos.
    """

    orderline_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity


@dataclass(frozen=True, kw_only=True)
class ValidatedOrder:
    """Order whose every field has been validated.

    Attributes:
        order_id: Order identifier.
        customer_info: Customer name and email.
        shipping_address: Verified shipping address.
        billing_address: Verified billing address.
        lines: Validated lines, in submission order.
    """

    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    lines: tuple[ValidatedOrderLine, ...]
