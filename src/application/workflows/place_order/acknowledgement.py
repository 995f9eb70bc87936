"""Acknowledgement and event stage of the place order workflow.

Nothing here can fail the workflow: a delivery that reports NOT_SENT only
means there is no AcknowledgementSent event.
"""

from src.domain.entities import OrderAcknowledgement, PricedOrder
from src.domain.enums import SendResult
from src.domain.events import (
    AcknowledgementSent,
    BillableOrderPlaced,
    OrderPlaced,
    PlaceOrderEvent,
)
from src.domain.protocols import CreateAcknowledgementLetter, SendAcknowledgement


def acknowledge_order(
    create_acknowledgement_letter: CreateAcknowledgementLetter,
    send_acknowledgement: SendAcknowledgement,
    priced_order: PricedOrder,
) -> AcknowledgementSent | None:
    """Render and send the order acknowledgement.

    The letter is always rendered and delivery always attempted.

    Args:
        create_acknowledgement_letter: Letter renderer.
        send_acknowledgement: Delivery collaborator.
        priced_order: Order to acknowledge.

    Returns:
        AcknowledgementSent if delivery reported SENT, otherwise None.
    """
    letter = create_acknowledgement_letter(priced_order)
    acknowledgement = OrderAcknowledgement(
        email_address=priced_order.customer_info.email_address,
        letter=letter,
    )
    match send_acknowledgement(acknowledgement):
        case SendResult.SENT:
            return AcknowledgementSent(
                order_id=priced_order.order_id,
                email_address=priced_order.customer_info.email_address,
            )
        case SendResult.NOT_SENT:
            return None


def create_order_placed_event(priced_order: PricedOrder) -> OrderPlaced:
    """Wrap the priced order in an OrderPlaced event."""
    return OrderPlaced(priced_order=priced_order)


def create_billing_event(priced_order: PricedOrder) -> BillableOrderPlaced | None:
    """Create a billing event when there is something to bill.

    Args:
        priced_order: Priced order.

    Returns:
        BillableOrderPlaced if amount_to_bill is greater than zero,
        otherwise None.
    """
    if priced_order.amount_to_bill.value > 0:
        return BillableOrderPlaced(
            order_id=priced_order.order_id,
            billing_address=priced_order.billing_address,
            amount_to_bill=priced_order.amount_to_bill,
        )
    return None


def create_events(
    priced_order: PricedOrder,
    acknowledgement_event: AcknowledgementSent | None,
) -> list[PlaceOrderEvent]:
    """Assemble the events of a successfully priced order.

    Order is fixed: acknowledgement (if any), order placed (always),
    billing (if any).
    """
    events: list[PlaceOrderEvent] = []
    if acknowledgement_event is not None:
        events.append(acknowledgement_event)
    events.append(create_order_placed_event(priced_order))
    billing_event = create_billing_event(priced_order)
    if billing_event is not None:
        events.append(billing_event)
    return events
