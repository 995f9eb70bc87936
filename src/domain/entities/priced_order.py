"""Priced order.

Output of the pricing stage: the validated order plus a price for every line
and the total amount to bill.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Frozen snapshot, consumed read-only by acknowledgement and events
"""

from dataclasses import dataclass

from src.domain.value_objects import (
    Address,
    BillingAmount,
    CustomerInfo,
    OrderId,
    OrderLineId,
    OrderQuantity,
    Price,
    ProductCode,
)


@dataclass(frozen=True, kw_only=True)
class PricedOrderLine:
    """Validated order line with its price.

    Attributes:
        orderline_id: Line identifier.
        product_code: Catalog product.
        quantity: Units or kilograms.
        line_price: Unit price times quantity.
    """

    orderline_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity
    line_price: Price


@dataclass(frozen=True, kw_only=True)
class PricedOrder:
    """Validated order with line prices and a billing total.

    Attributes:
        order_id: Order identifier.
        customer_info: Customer name and email.
        shipping_address: Verified shipping address.
        billing_address: Verified billing address.
        amount_to_bill: Sum of all line prices.
        lines: Priced lines, in submission order.
    """

    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    amount_to_bill: BillingAmount
    lines: tuple[PricedOrderLine, ...]
