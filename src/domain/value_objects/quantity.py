"""Order quantity value objects.

Widgets are counted in whole units, gizmos are weighed in kilograms.
``OrderQuantity`` is the closed union of the two; which variant a line gets is
decided once, from its product code, by ``create_order_quantity``.
"""

import math
from dataclasses import dataclass
from typing import TypeAlias

from src.core.constants import (
    KILOGRAM_QUANTITY_MAX,
    KILOGRAM_QUANTITY_MIN,
    UNIT_QUANTITY_MAX,
    UNIT_QUANTITY_MIN,
)
from src.core.result import Failure, Result, Success
from src.domain.validators import create_decimal, create_int, ensure_valid
from src.domain.value_objects.product_code import GizmoCode, ProductCode, WidgetCode


@dataclass(frozen=True)
class UnitQuantity:
    """Whole number of units between 1 and 1000.

    Attributes:
        value: Number of units.
    """

    value: int

    def __post_init__(self) -> None:
        ensure_valid(
            create_int("UnitQuantity", UNIT_QUANTITY_MIN, UNIT_QUANTITY_MAX, self.value)
        )

    @classmethod
    def create(cls, field_name: str, value: int) -> Result["UnitQuantity", str]:
        """Create a UnitQuantity, failing outside 1..1000."""
        result = create_int(field_name, UNIT_QUANTITY_MIN, UNIT_QUANTITY_MAX, value)
        if isinstance(result, Failure):
            return result
        return Success(value=cls(result.value))


@dataclass(frozen=True)
class KilogramQuantity:
    """Weight in kilograms between 0.05 and 100.0.

    Attributes:
        value: Weight in kilograms.
    """

    value: float

    def __post_init__(self) -> None:
        ensure_valid(
            create_decimal(
                "KilogramQuantity",
                KILOGRAM_QUANTITY_MIN,
                KILOGRAM_QUANTITY_MAX,
                self.value,
            )
        )

    @classmethod
    def create(cls, field_name: str, value: float) -> Result["KilogramQuantity", str]:
        """Create a KilogramQuantity, failing outside 0.05..100.0."""
        result = create_decimal(
            field_name, KILOGRAM_QUANTITY_MIN, KILOGRAM_QUANTITY_MAX, value
        )
        if isinstance(result, Failure):
            return result
        return Success(value=cls(result.value))


OrderQuantity: TypeAlias = UnitQuantity | KilogramQuantity


def create_order_quantity(
    field_name: str, product_code: ProductCode, quantity: float
) -> Result[OrderQuantity, str]:
    """Create the quantity variant that matches the product code.

    Widgets get a UnitQuantity from the quantity truncated toward zero.
    Gizmos get a KilogramQuantity from the quantity as given.

    Args:
        field_name: Field name reported in the failure message.
        product_code: Already validated product code.
        quantity: Raw quantity.

    Returns:
        Success(UnitQuantity | KilogramQuantity) or Failure(message).

    Example:
        >>> create_order_quantity("OrderQuantity", WidgetCode("W1234"), 3.9)
        Success(value=UnitQuantity(value=3))
        >>> create_order_quantity("OrderQuantity", GizmoCode("G123"), 3.9)
        Success(value=KilogramQuantity(value=3.9))
    """
    match product_code:
        case WidgetCode():
            if not math.isfinite(quantity):
                return Failure(error=f"{field_name}: Must be a finite number")
            return UnitQuantity.create(field_name, int(quantity))
        case GizmoCode():
            return KilogramQuantity.create(field_name, quantity)


def order_quantity_value(quantity: OrderQuantity) -> float:
    """Return the quantity of either variant as a float."""
    match quantity:
        case UnitQuantity(value=units):
            return float(units)
        case KilogramQuantity(value=kilograms):
            return kilograms
