"""HTML acknowledgement letter renderer.

Renders the letter customers receive once their order is priced: a greeting,
one table row per order line and the amount to bill. Every interpolated value
is HTML-escaped.
"""

from html import escape

from src.domain.entities import PricedOrder, PricedOrderLine
from src.domain.value_objects import (
    HtmlString,
    KilogramQuantity,
    UnitQuantity,
    product_code_value,
)


def _format_quantity(line: PricedOrderLine) -> str:
    match line.quantity:
        case UnitQuantity(value=units):
            return f"{units}"
        case KilogramQuantity(value=kilograms):
            return f"{kilograms:g} kg"


def _format_amount(amount: float) -> str:
    return f"{amount:.2f}"


class HtmlLetterRenderer:
    """CreateAcknowledgementLetter implementation producing HTML.

    Attributes:
        _company_name: Company name shown in the letter heading and signature.
    """

    def __init__(self, company_name: str) -> None:
        self._company_name = company_name

    def __call__(self, priced_order: PricedOrder) -> HtmlString:
        """Render the acknowledgement letter for a priced order.

        Args:
            priced_order: Order to acknowledge.

        Returns:
            HtmlString: Complete HTML document.
        """
        company = escape(self._company_name)
        order_id = escape(priced_order.order_id.value)
        customer = escape(priced_order.customer_info.name.full_name)

        rows = "\n".join(
            "      <tr>"
            f"<td>{escape(line.orderline_id.value)}</td>"
            f"<td>{escape(product_code_value(line.product_code))}</td>"
            f"<td>{escape(_format_quantity(line))}</td>"
            f"<td>{_format_amount(line.line_price.value)}</td>"
            "</tr>"
            for line in priced_order.lines
        )

        return HtmlString(
            value=(
                "<!DOCTYPE html>\n"
                "<html>\n"
                f"  <head><title>{company}: order {order_id}</title></head>\n"
                "  <body>\n"
                f"    <p>Dear {customer},</p>\n"
                f"    <p>Thank you for your order {order_id}.</p>\n"
                "    <table>\n"
                "      <tr><th>Line</th><th>Product</th><th>Quantity</th><th>Price</th></tr>\n"
                f"{rows}\n"
                "    </table>\n"
                "    <p>Amount to bill: "
                f"{_format_amount(priced_order.amount_to_bill.value)}</p>\n"
                f"    <p>{company}</p>\n"
                "  </body>\n"
                "</html>\n"
            )
        )
