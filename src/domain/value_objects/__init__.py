"""Domain value objects with validation.

Immutable value objects that enforce business constraints. Each constrained
type offers a ``create`` factory returning a Result, and refuses invalid
values in ``__post_init__`` so an invalid instance cannot exist.
"""

from src.domain.value_objects.address import Address
from src.domain.value_objects.customer_info import CustomerInfo, PersonName
from src.domain.value_objects.email_address import EmailAddress
from src.domain.value_objects.letter import HtmlString
from src.domain.value_objects.money import BillingAmount, Price
from src.domain.value_objects.order_identifiers import OrderId, OrderLineId
from src.domain.value_objects.product_code import (
    GizmoCode,
    ProductCode,
    WidgetCode,
    create_product_code,
    product_code_value,
)
from src.domain.value_objects.quantity import (
    KilogramQuantity,
    OrderQuantity,
    UnitQuantity,
    create_order_quantity,
    order_quantity_value,
)
from src.domain.value_objects.string50 import String50
from src.domain.value_objects.zip_code import ZipCode

__all__ = [
    "Address",
    "BillingAmount",
    "CustomerInfo",
    "EmailAddress",
    "GizmoCode",
    "HtmlString",
    "KilogramQuantity",
    "OrderId",
    "OrderLineId",
    "OrderQuantity",
    "PersonName",
    "Price",
    "ProductCode",
    "String50",
    "UnitQuantity",
    "WidgetCode",
    "ZipCode",
    "create_order_quantity",
    "create_product_code",
    "order_quantity_value",
    "product_code_value",
]
