"""Pricing stage of the place order workflow.

Turns a ValidatedOrder into a PricedOrder.

Flow (all-or-nothing):
1. For each line, left to right: look up the unit price, multiply by the
   line quantity. A line price above the Price bound fails the stage.
2. Sum the line prices into the amount to bill. A total above the
   BillingAmount bound fails the stage.

Any failure discards the lines already priced.
"""

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success, traverse
from src.domain.entities import (
    PricedOrder,
    PricedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
)
from src.domain.errors import PricingError
from src.domain.protocols import GetProductPrice
from src.domain.value_objects import BillingAmount, Price, order_quantity_value


def _pricing_error(message: str) -> PricingError:
    return PricingError(code=ErrorCode.PRICING_FAILED, message=message)


def to_priced_order_line(
    get_product_price: GetProductPrice,
    line: ValidatedOrderLine,
) -> Result[PricedOrderLine, PricingError]:
    """Price one validated line.

    Args:
        get_product_price: Unit price collaborator.
        line: Validated order line.

    Returns:
        Success(PricedOrderLine) or Failure(PricingError) when the line price
        is out of bounds.
    """
    unit_price = get_product_price(line.product_code)
    line_price = Price.multiply(order_quantity_value(line.quantity), unit_price)
    if isinstance(line_price, Failure):
        return Failure(error=_pricing_error(line_price.error))

    return Success(
        value=PricedOrderLine(
            orderline_id=line.orderline_id,
            product_code=line.product_code,
            quantity=line.quantity,
            line_price=line_price.value,
        )
    )


def price_order(
    get_product_price: GetProductPrice,
    validated_order: ValidatedOrder,
) -> Result[PricedOrder, PricingError]:
    """Price a validated order.

    Args:
        get_product_price: Unit price collaborator.
        validated_order: Output of the validation stage.

    Returns:
        Success(PricedOrder) or the first Failure(PricingError).
    """
    lines = traverse(
        validated_order.lines,
        lambda line: to_priced_order_line(get_product_price, line),
    )
    if isinstance(lines, Failure):
        return lines

    amount_to_bill = BillingAmount.sum_prices(line.line_price for line in lines.value)
    if isinstance(amount_to_bill, Failure):
        return Failure(error=_pricing_error(amount_to_bill.error))

    return Success(
        value=PricedOrder(
            order_id=validated_order.order_id,
            customer_info=validated_order.customer_info,
            shipping_address=validated_order.shipping_address,
            billing_address=validated_order.billing_address,
            amount_to_bill=amount_to_bill.value,
            lines=tuple(lines.value),
        )
    )
