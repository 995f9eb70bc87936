"""Integration tests for the place order flow through the container.

Tests cover:
- Handler built by get_place_order_handler with default adapters
- Events and acknowledgement outbox after a successful order
- Concurrent orders do not interfere
- Remote address service failure surfaces as RemoteServiceError
- Remote checker reuses one HTTP client until shutdown

Architecture:
- Real adapters (catalog, stub address checker, HTML renderer, sender)
- Real structlog output (JSON, testing environment)
- Address service mocked with pytest-httpx when a URL is configured
"""

import asyncio
import os
from unittest.mock import patch

import httpx
import pytest
from pytest_httpx import HTTPXMock

from src.application.commands import PlaceOrder
from src.core.container import (
    close_address_checker,
    get_acknowledgement_sender,
    get_address_checker,
    get_letter_renderer,
    get_logger,
    get_place_order_handler,
    get_product_catalog,
    get_settings,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.errors import RemoteServiceError
from src.domain.events import AcknowledgementSent, BillableOrderPlaced, OrderPlaced
from tests.conftest import create_line, create_order

FACTORIES = (
    get_settings,
    get_logger,
    get_product_catalog,
    get_address_checker,
    get_letter_renderer,
    get_acknowledgement_sender,
)


@pytest.fixture
def container_env():
    """Testing environment with fresh container singletons."""

    def configure(**env: str):
        for factory in FACTORIES:
            factory.cache_clear()
        patcher = patch.dict(os.environ, {"ENVIRONMENT": "testing", **env}, clear=True)
        patcher.start()
        patchers.append(patcher)

    patchers: list = []
    yield configure
    for patcher in patchers:
        patcher.stop()
    for factory in FACTORIES:
        factory.cache_clear()


@pytest.mark.integration
class TestPlaceOrderFlow:
    """Test the handler wired by the container."""

    @pytest.mark.asyncio
    async def test_successful_order(self, container_env):
        container_env()
        handler = get_place_order_handler()
        order = create_order(lines=(create_line("W1001", 5),))

        result = await handler.handle(PlaceOrder(order=order))

        assert isinstance(result, Success)
        assert [type(event) for event in result.value] == [
            AcknowledgementSent,
            OrderPlaced,
            BillableOrderPlaced,
        ]
        assert result.value[1].amount_to_bill.value == 50.0

        (acknowledgement,) = get_acknowledgement_sender().outbox
        assert acknowledgement.email_address.value == "jane@example.com"
        assert "Widgets &amp; Gizmos Ltd" in acknowledgement.letter.value

    @pytest.mark.asyncio
    async def test_pricing_failure_sends_nothing(self, container_env):
        container_env()
        handler = get_place_order_handler()
        order = create_order(lines=(create_line("W1002", 5),))

        result = await handler.handle(PlaceOrder(order=order))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PRICING_FAILED
        assert get_acknowledgement_sender().outbox == []

    @pytest.mark.asyncio
    async def test_concurrent_orders_are_independent(self, container_env):
        container_env()
        handler = get_place_order_handler()
        orders = [
            create_order(order_id=f"ORD-{i}", lines=(create_line("W1001", i),))
            for i in range(1, 6)
        ]

        results = await asyncio.gather(
            *(handler.handle(PlaceOrder(order=order)) for order in orders)
        )

        amounts = [result.value[1].amount_to_bill.value for result in results]
        assert amounts == [10.0, 20.0, 30.0, 40.0, 50.0]
        assert len(get_acknowledgement_sender().outbox) == 5


@pytest.mark.integration
class TestRemoteAddressService:
    """Test the flow against a mocked remote address service."""

    @pytest.mark.asyncio
    async def test_service_outage_is_remote_service_error(
        self, container_env, httpx_mock: HTTPXMock
    ):
        container_env(ADDRESS_SERVICE_URL="https://addresses.test")
        httpx_mock.add_response(
            method="POST",
            url="https://addresses.test/addresses/verify",
            status_code=502,
        )
        handler = get_place_order_handler()

        result = await handler.handle(PlaceOrder(order=create_order()))

        assert isinstance(result, Failure)
        assert isinstance(result.error, RemoteServiceError)
        assert result.error.service.endpoint == "https://addresses.test/addresses/verify"

    @pytest.mark.asyncio
    async def test_both_addresses_verified_remotely(
        self, container_env, httpx_mock: HTTPXMock
    ):
        container_env(ADDRESS_SERVICE_URL="https://addresses.test")
        httpx_mock.add_response(
            method="POST",
            url="https://addresses.test/addresses/verify",
            status_code=200,
            is_reusable=True,
        )
        handler = get_place_order_handler()

        result = await handler.handle(PlaceOrder(order=create_order()))

        assert isinstance(result, Success)
        assert len(httpx_mock.get_requests()) == 2

    @pytest.mark.asyncio
    async def test_timeout_is_reported_with_timeout_code(
        self, container_env, httpx_mock: HTTPXMock
    ):
        container_env(ADDRESS_SERVICE_URL="https://addresses.test")
        httpx_mock.add_exception(httpx.ConnectTimeout("connect timed out"))
        handler = get_place_order_handler()

        result = await handler.handle(PlaceOrder(order=create_order()))

        assert result.error.code == ErrorCode.REMOTE_SERVICE_TIMEOUT

    @pytest.mark.asyncio
    async def test_requests_share_one_client_until_shutdown(
        self, container_env, httpx_mock: HTTPXMock
    ):
        container_env(ADDRESS_SERVICE_URL="https://addresses.test")
        httpx_mock.add_response(
            method="POST",
            url="https://addresses.test/addresses/verify",
            status_code=200,
            is_reusable=True,
        )
        client = get_address_checker()._client

        for _ in range(2):
            result = await get_place_order_handler().handle(
                PlaceOrder(order=create_order())
            )
            assert isinstance(result, Success)

        assert get_address_checker()._client is client
        assert not client.is_closed

        await close_address_checker()

        assert client.is_closed
        assert get_address_checker.cache_info().currsize == 0
