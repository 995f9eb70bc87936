"""Place order handler.

Flow:
1. Bind order_id to the logger, log the attempt
2. Run the place order workflow with the injected collaborators
3. Log the outcome (event types on success, error on failure)
4. Return the workflow Result unchanged

Architecture:
- Application layer ONLY imports from domain layer and the workflow
- NO infrastructure imports (collaborators are injected via protocols)
- Handler adds observability, never changes the outcome
"""

from src.application.commands.order_commands import PlaceOrder
from src.application.workflows.place_order import place_order
from src.core.result import Failure, Result, Success
from src.domain.errors import PlaceOrderError, RemoteServiceError
from src.domain.events import PlaceOrderEvent
from src.domain.protocols import (
    CheckAddressExists,
    CheckProductExists,
    CreateAcknowledgementLetter,
    GetProductPrice,
    LoggerProtocol,
    SendAcknowledgement,
)


class PlaceOrderHandler:
    """Handler for the PlaceOrder command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (entities, events, protocols)
    - Infrastructure layer (catalog, address service, letters via injection)
    """

    def __init__(
        self,
        check_product_exists: CheckProductExists,
        check_address_exists: CheckAddressExists,
        get_product_price: GetProductPrice,
        create_acknowledgement_letter: CreateAcknowledgementLetter,
        send_acknowledgement: SendAcknowledgement,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            check_product_exists: Catalog membership check.
            check_address_exists: Address verification service.
            get_product_price: Unit price lookup.
            create_acknowledgement_letter: Letter renderer.
            send_acknowledgement: Acknowledgement delivery.
            logger: Structured logger.
        """
        self._check_product_exists = check_product_exists
        self._check_address_exists = check_address_exists
        self._get_product_price = get_product_price
        self._create_acknowledgement_letter = create_acknowledgement_letter
        self._send_acknowledgement = send_acknowledgement
        self._logger = logger

    async def handle(
        self, cmd: PlaceOrder
    ) -> Result[list[PlaceOrderEvent], PlaceOrderError]:
        """Handle the PlaceOrder command.

        Args:
            cmd: PlaceOrder command carrying the raw order.

        Returns:
            Success(events) on success.
            Failure(PlaceOrderError) describing the first problem found.
        """
        logger = self._logger.bind(order_id=cmd.order.order_id)
        logger.info("place_order_started", line_count=len(cmd.order.lines))

        result = await place_order(
            check_product_exists=self._check_product_exists,
            check_address_exists=self._check_address_exists,
            get_product_price=self._get_product_price,
            create_acknowledgement_letter=self._create_acknowledgement_letter,
            send_acknowledgement=self._send_acknowledgement,
            unvalidated_order=cmd.order,
        )

        match result:
            case Success(value=events):
                logger.info(
                    "place_order_succeeded",
                    event_count=len(events),
                    event_types=[type(event).__name__ for event in events],
                )
            case Failure(error=RemoteServiceError() as error):
                logger.error(
                    "place_order_failed",
                    error_code=error.code.value,
                    error_message=error.message,
                    service_name=error.service.name,
                    endpoint=error.service.endpoint,
                    cause=error.cause,
                )
            case Failure(error=error):
                logger.warning(
                    "place_order_failed",
                    error_code=error.code.value,
                    error_message=error.message,
                )

        return result
