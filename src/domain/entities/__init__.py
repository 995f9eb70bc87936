"""Domain entities.

Immutable snapshots of an order as it moves through the workflow:
UnvalidatedOrder -> ValidatedOrder -> PricedOrder. Each stage consumes the
previous snapshot and produces the next one.
"""

from src.domain.entities.checked_address import CheckedAddress
from src.domain.entities.order_acknowledgement import OrderAcknowledgement
from src.domain.entities.priced_order import PricedOrder, PricedOrderLine
from src.domain.entities.unvalidated_order import (
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)
from src.domain.entities.validated_order import ValidatedOrder, ValidatedOrderLine

__all__ = [
    "CheckedAddress",
    "OrderAcknowledgement",
    "PricedOrder",
    "PricedOrderLine",
    "UnvalidatedAddress",
    "UnvalidatedCustomerInfo",
    "UnvalidatedOrder",
    "UnvalidatedOrderLine",
    "ValidatedOrder",
    "ValidatedOrderLine",
]
