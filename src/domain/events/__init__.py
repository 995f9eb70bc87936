"""Domain events module.

This module exports the domain events produced by the place order workflow.

Usage:
    >>> from src.domain.events import OrderPlaced, PlaceOrderEvent
    >>>
    >>> for event in events:
    ...     match event:
    ...         case OrderPlaced(priced_order=order):
    ...             ship(order)
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.order_events import (
    AcknowledgementSent,
    BillableOrderPlaced,
    OrderPlaced,
    PlaceOrderEvent,
)

__all__ = [
    "AcknowledgementSent",
    "BillableOrderPlaced",
    "DomainEvent",
    "OrderPlaced",
    "PlaceOrderEvent",
]
