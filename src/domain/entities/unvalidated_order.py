"""Unvalidated order input.

Raw, untrusted order data exactly as received from the outside world. Every
field is a plain string or float; nothing here has been checked yet. The
validation stage is the only consumer of these types.

Usage:
    from src.domain.entities import UnvalidatedOrder, UnvalidatedOrderLine

    order = UnvalidatedOrder(
        order_id="ORD-1",
        customer_info=UnvalidatedCustomerInfo(
            first_name="Jane", last_name="Doe", email_address="jane@example.com"
        ),
        shipping_address=address,
        billing_address=address,
        lines=(UnvalidatedOrderLine(orderline_id="L1", product_code="W1001", quantity=5),),
    )
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class UnvalidatedCustomerInfo:
    """Raw customer identity fields.

    Attributes:
        first_name: Given name as typed by the customer.
        last_name: Family name as typed by the customer.
        email_address: Email address as typed by the customer.
    """

    first_name: str
    last_name: str
    email_address: str


@dataclass(frozen=True, kw_only=True)
class UnvalidatedAddress:
    """Raw postal address fields.

    Empty strings stand for absent optional lines.

    Attributes:
        address_line1: First address line.
        address_line2: Second address line ("" when absent).
        address_line3: Third address line ("" when absent).
        address_line4: Fourth address line ("" when absent).
        city: City name.
        zipcode: Zip code.
    """

    address_line1: str
    address_line2: str = ""
    address_line3: str = ""
    address_line4: str = ""
    city: str
    zipcode: str


@dataclass(frozen=True, kw_only=True)
class UnvalidatedOrderLine:
    """Raw order line.

    Attributes:
        orderline_id: Caller-supplied line identifier.
        product_code: Product code as typed by the customer.
        quantity: Units or kilograms, depending on the product.
    """

    orderline_id: str
    product_code: str
    quantity: float


@dataclass(frozen=True, kw_only=True)
class UnvalidatedOrder:
    """Raw order as submitted.

    Attributes:
        order_id: Caller-supplied order identifier.
        customer_info: Raw customer fields.
        shipping_address: Raw shipping address.
        billing_address: Raw billing address.
        lines: Raw order lines, in submission order.
    """

    order_id: str
    customer_info: UnvalidatedCustomerInfo
    shipping_address: UnvalidatedAddress
    billing_address: UnvalidatedAddress
    lines: tuple[UnvalidatedOrderLine, ...] = ()
