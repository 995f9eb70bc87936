"""Place order workflow.

Composes the three stages into the single entry point:

    validate -> price -> acknowledge + create events

Validation and pricing failures are returned immediately as the unified
PlaceOrderError; the acknowledgement stage cannot fail the workflow.

Concurrency:
    One invocation per order, no shared state. The shipping and billing
    address checks are the only suspension points and run one after the
    other. Callers that need a timeout wrap the whole call
    (e.g. ``asyncio.timeout``).
"""

from src.application.workflows.place_order.acknowledgement import (
    acknowledge_order,
    create_events,
)
from src.application.workflows.place_order.pricing import price_order
from src.application.workflows.place_order.validation import validate_order
from src.core.result import Failure, Result, Success
from src.domain.entities import UnvalidatedOrder
from src.domain.errors import PlaceOrderError
from src.domain.events import PlaceOrderEvent
from src.domain.protocols import (
    CheckAddressExists,
    CheckProductExists,
    CreateAcknowledgementLetter,
    GetProductPrice,
    SendAcknowledgement,
)


async def place_order(
    *,
    check_product_exists: CheckProductExists,
    check_address_exists: CheckAddressExists,
    get_product_price: GetProductPrice,
    create_acknowledgement_letter: CreateAcknowledgementLetter,
    send_acknowledgement: SendAcknowledgement,
    unvalidated_order: UnvalidatedOrder,
) -> Result[list[PlaceOrderEvent], PlaceOrderError]:
    """Validate, price and acknowledge an order.

    Args:
        check_product_exists: Catalog membership collaborator.
        check_address_exists: Address verification collaborator (async).
        get_product_price: Unit price collaborator.
        create_acknowledgement_letter: Letter renderer.
        send_acknowledgement: Acknowledgement delivery collaborator.
        unvalidated_order: Raw order.

    Returns:
        Success(events) with events ordered AcknowledgementSent (if
        delivered), OrderPlaced, BillableOrderPlaced (if amount > 0);
        otherwise Failure(ValidationError | PricingError | RemoteServiceError).
    """
    validated_order = await validate_order(
        check_product_exists, check_address_exists, unvalidated_order
    )
    if isinstance(validated_order, Failure):
        return validated_order

    priced_order = price_order(get_product_price, validated_order.value)
    if isinstance(priced_order, Failure):
        return priced_order

    acknowledgement_event = acknowledge_order(
        create_acknowledgement_letter, send_acknowledgement, priced_order.value
    )
    return Success(value=create_events(priced_order.value, acknowledgement_event))
