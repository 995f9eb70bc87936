"""Shared builders and fixtures for order-taking tests.

Builders return raw (unvalidated) input with sensible defaults so each test
only spells out the field it is about. Collaborator fixtures are fresh per
test, so recorded calls never leak between tests.
"""

import pytest

from src.core.result import Success
from src.domain.entities import (
    CheckedAddress,
    PricedOrder,
    PricedOrderLine,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
)
from src.domain.enums import SendResult
from src.domain.value_objects import (
    Address,
    BillingAmount,
    CustomerInfo,
    EmailAddress,
    GizmoCode,
    HtmlString,
    KilogramQuantity,
    OrderId,
    OrderLineId,
    PersonName,
    Price,
    String50,
    UnitQuantity,
    WidgetCode,
    ZipCode,
)
from src.infrastructure.address import StubAddressChecker
from src.infrastructure.catalog import InMemoryProductCatalog


# Test helper functions for order input

DEFAULT_PRICES: dict[str, float] = {
    "W1001": 10.0,
    "W1002": 25.0,
    "W2040": 40.0,
    "G123": 19.99,
    "G500": 2.5,
}


def create_address(**overrides: str) -> UnvalidatedAddress:
    """Helper to create a raw address that passes validation.

    Args:
        **overrides: Field values replacing the defaults.

    Returns:
        UnvalidatedAddress for testing.
    """
    fields = {
        "address_line1": "1 Main Street",
        "city": "Springfield",
        "zipcode": "12345",
    }
    fields.update(overrides)
    return UnvalidatedAddress(**fields)


def create_customer(**overrides: str) -> UnvalidatedCustomerInfo:
    """Helper to create raw customer info that passes validation."""
    fields = {
        "first_name": "Jane",
        "last_name": "Doe",
        "email_address": "jane@example.com",
    }
    fields.update(overrides)
    return UnvalidatedCustomerInfo(**fields)


def create_line(
    product_code: str = "W1001",
    quantity: float = 5,
    orderline_id: str = "L1",
) -> UnvalidatedOrderLine:
    """Helper to create a raw order line."""
    return UnvalidatedOrderLine(
        orderline_id=orderline_id,
        product_code=product_code,
        quantity=quantity,
    )


def create_order(
    *,
    order_id: str = "ORD-1",
    customer_info: UnvalidatedCustomerInfo | None = None,
    shipping_address: UnvalidatedAddress | None = None,
    billing_address: UnvalidatedAddress | None = None,
    lines: tuple[UnvalidatedOrderLine, ...] | None = None,
) -> UnvalidatedOrder:
    """Helper to create a raw order.

    Defaults: one widget line (W1001, quantity 5), valid customer and
    identical shipping and billing addresses.

    Usage:
        order = create_order(lines=(create_line("G123", 2.5),))
    """
    return UnvalidatedOrder(
        order_id=order_id,
        customer_info=customer_info or create_customer(),
        shipping_address=shipping_address or create_address(),
        billing_address=billing_address or create_address(),
        lines=lines if lines is not None else (create_line(),),
    )


async def accept_address(address: UnvalidatedAddress):
    """Address check that accepts everything."""
    return Success(value=CheckedAddress(address=address))


def render_letter(priced_order) -> HtmlString:
    """Letter renderer returning a fixed letter."""
    return HtmlString(value=f"<p>Order {priced_order.order_id.value}</p>")


def send_ok(acknowledgement) -> SendResult:
    return SendResult.SENT


def send_not_sent(acknowledgement) -> SendResult:
    return SendResult.NOT_SENT


# Fixtures


@pytest.fixture
def catalog() -> InMemoryProductCatalog:
    """Fresh catalog with the test price list."""
    return InMemoryProductCatalog(DEFAULT_PRICES)


@pytest.fixture
def address_checker() -> StubAddressChecker:
    """Stub address service: 99999 unknown, 00000 malformed."""
    return StubAddressChecker(unknown_zipcodes=["99999"], malformed_zipcodes=["00000"])


# Test helper functions for validated and priced orders


def create_validated_line(
    code: str = "W1001", quantity: float = 5, line_id: str = "L1"
) -> ValidatedOrderLine:
    """Helper to create a ValidatedOrderLine for a widget or gizmo code."""
    if code.startswith("W"):
        product_code, order_quantity = WidgetCode(code), UnitQuantity(int(quantity))
    else:
        product_code, order_quantity = GizmoCode(code), KilogramQuantity(quantity)
    return ValidatedOrderLine(
        orderline_id=OrderLineId(line_id),
        product_code=product_code,
        quantity=order_quantity,
    )


def create_validated_order(*lines: ValidatedOrderLine) -> ValidatedOrder:
    """Helper to create a ValidatedOrder with the given lines."""
    address = Address(
        address_line1=String50("1 Main Street"),
        city=String50("Springfield"),
        zipcode=ZipCode("12345"),
    )
    return ValidatedOrder(
        order_id=OrderId("ORD-1"),
        customer_info=CustomerInfo(
            name=PersonName(first_name=String50("Jane"), last_name=String50("Doe")),
            email_address=EmailAddress("jane@example.com"),
        ),
        shipping_address=address,
        billing_address=address,
        lines=lines,
    )


def create_priced_order(*lines: PricedOrderLine) -> PricedOrder:
    """Helper to create a PricedOrder billed at the sum of its line prices."""
    validated = create_validated_order()
    return PricedOrder(
        order_id=validated.order_id,
        customer_info=validated.customer_info,
        shipping_address=validated.shipping_address,
        billing_address=validated.billing_address,
        amount_to_bill=BillingAmount(sum((line.line_price.value for line in lines), 0.0)),
        lines=lines,
    )


def create_priced_line(
    code: str = "W1001", quantity: float = 5, line_price: float = 50.0, line_id: str = "L1"
) -> PricedOrderLine:
    """Helper to create a PricedOrderLine."""
    validated = create_validated_line(code, quantity, line_id)
    return PricedOrderLine(
        orderline_id=validated.orderline_id,
        product_code=validated.product_code,
        quantity=validated.quantity,
        line_price=Price(line_price),
    )
