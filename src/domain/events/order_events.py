"""Order placement domain events.

Pattern: the place order workflow emits, in this order,
- AcknowledgementSent: only when the acknowledgement was delivered
- OrderPlaced: always, exactly once per priced order
- BillableOrderPlaced: only when there is something to bill

Consumers:
- Shipping: OrderPlaced
- Billing: BillableOrderPlaced
- Customer service: AcknowledgementSent
"""

from dataclasses import dataclass
from typing import TypeAlias

from src.domain.entities import PricedOrder
from src.domain.events.base_event import DomainEvent
from src.domain.value_objects import Address, BillingAmount, EmailAddress, OrderId


@dataclass(frozen=True, kw_only=True)
class AcknowledgementSent(DomainEvent):
    """Order acknowledgement delivered to the customer.

    Attributes:
        order_id: Acknowledged order.
        email_address: Where the acknowledgement was sent.
    """

    order_id: OrderId
    email_address: EmailAddress


@dataclass(frozen=True, kw_only=True)
class OrderPlaced(DomainEvent):
    """Order validated and priced.

    Carries the whole priced order for downstream shipping.

    Attributes:
        priced_order: The order as priced by the workflow.
    """

    priced_order: PricedOrder

    @property
    def order_id(self) -> OrderId:
        return self.priced_order.order_id

    @property
    def amount_to_bill(self) -> BillingAmount:
        return self.priced_order.amount_to_bill


@dataclass(frozen=True, kw_only=True)
class BillableOrderPlaced(DomainEvent):
    """Order placed with a non-zero amount to bill.

    Attributes:
        order_id: Order to bill.
        billing_address: Verified billing address.
        amount_to_bill: Total to charge.
    """

    order_id: OrderId
    billing_address: Address
    amount_to_bill: BillingAmount


PlaceOrderEvent: TypeAlias = AcknowledgementSent | OrderPlaced | BillableOrderPlaced
