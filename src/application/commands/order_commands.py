"""Order commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass

from src.domain.entities import UnvalidatedOrder


@dataclass(frozen=True, kw_only=True)
class PlaceOrder:
    """Place a customer order.

    Validates, prices and acknowledges the order, producing the events to
    publish.

    Attributes:
        order: Raw order as submitted by the customer.

    Example:
        >>> command = PlaceOrder(order=unvalidated_order)
        >>> result = await handler.handle(command)
    """

    order: UnvalidatedOrder
