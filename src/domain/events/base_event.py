"""Base domain event class.

This module defines the foundational DomainEvent base class used by all domain
events in the system. Domain events represent "things that happened" in the
business domain and are always named in past tense (e.g., OrderPlaced,
AcknowledgementSent).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUIDv7, time-ordered) for event tracking
    - Occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class OrderShipped(DomainEvent):
    ...     order_id: OrderId
    >>>
    >>> event = OrderShipped(order_id=OrderId("ORD-1"))
    >>> print(event.event_id)  # Auto-generated UUID
    >>> print(event.occurred_at)  # Auto-generated timestamp
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Domain events represent "things that happened" in the business domain.
    They are immutable records of facts that have occurred in the system.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (OrderPlaced, NOT PlaceOrder)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)
        5. Include all relevant business data for event consumers

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUIDv7 if not provided. Used for event tracking, deduplication,
            and correlation across systems.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.

    Notes:
        - Events are handed to the caller of the workflow, which owns
          publishing and persistence
        - Events are created only AFTER the order was priced (facts, not intents)
    """

    event_id: UUID = field(default_factory=uuid7)
    """Unique identifier for this event instance."""

    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    """Timestamp when the event occurred (UTC timezone)."""
