"""Product code value objects.

The catalog sells two kinds of product, each with its own code format:

- Widgets: "W" followed by four digits (e.g. "W1234"), sold by unit.
- Gizmos: "G" followed by three digits (e.g. "G123"), sold by weight.

``ProductCode`` is the closed union of the two. Downstream code dispatches on
the concrete class with ``match``; there is no third case.

Usage:
    from src.domain.value_objects.product_code import create_product_code

    match create_product_code("ProductCode", "W1234"):
        case Success(value=WidgetCode() as code):
            ...
"""

from dataclasses import dataclass
from typing import TypeAlias

from src.core.constants import (
    GIZMO_CODE_PATTERN,
    GIZMO_CODE_PREFIX,
    WIDGET_CODE_PATTERN,
    WIDGET_CODE_PREFIX,
)
from src.core.result import Failure, Result, Success
from src.domain.validators import create_like, ensure_valid


@dataclass(frozen=True)
class WidgetCode:
    """Code of a widget: "W" followed by four digits.

    Attributes:
        value: The product code string.
    """

    value: str

    def __post_init__(self) -> None:
        ensure_valid(create_like("WidgetCode", WIDGET_CODE_PATTERN, self.value))

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, field_name: str, value: str) -> Result["WidgetCode", str]:
        """Create a WidgetCode, failing if empty or not matching the pattern."""
        result = create_like(field_name, WIDGET_CODE_PATTERN, value)
        if isinstance(result, Failure):
            return result
        return Success(value=cls(result.value))


@dataclass(frozen=True)
class GizmoCode:
    """Code of a gizmo: "G" followed by three digits.

    Attributes:
        value: The product code string.
    """

    value: str

    def __post_init__(self) -> None:
        ensure_valid(create_like("GizmoCode", GIZMO_CODE_PATTERN, self.value))

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, field_name: str, value: str) -> Result["GizmoCode", str]:
        """Create a GizmoCode, failing if empty or not matching the pattern."""
        result = create_like(field_name, GIZMO_CODE_PATTERN, value)
        if isinstance(result, Failure):
            return result
        return Success(value=cls(result.value))


ProductCode: TypeAlias = WidgetCode | GizmoCode


def create_product_code(field_name: str, code: str) -> Result[ProductCode, str]:
    """Create a product code, dispatching on its first character.

    Args:
        field_name: Field name reported in the failure message.
        code: Raw product code.

    Returns:
        Success(WidgetCode) for "W..." codes, Success(GizmoCode) for "G..."
        codes, otherwise Failure(message). A recognised prefix with a bad
        body fails with the pattern message of that variant.

    Example:
        >>> create_product_code("ProductCode", "G123")
        Success(value=GizmoCode(value='G123'))
        >>> create_product_code("ProductCode", "X1")
        Failure(error="ProductCode: Format not recognized 'X1'")
    """
    if not code:
        return Failure(error=f"{field_name}: must not be empty")
    if code.startswith(WIDGET_CODE_PREFIX):
        return WidgetCode.create(field_name, code)
    if code.startswith(GIZMO_CODE_PREFIX):
        return GizmoCode.create(field_name, code)
    return Failure(error=f"{field_name}: Format not recognized '{code}'")


def product_code_value(code: ProductCode) -> str:
    """Return the raw string inside either product code variant."""
    match code:
        case WidgetCode(value=value) | GizmoCode(value=value):
            return value
