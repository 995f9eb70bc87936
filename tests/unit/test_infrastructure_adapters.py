"""Unit tests for the in-process collaborator adapters.

Tests cover:
- InMemoryProductCatalog membership and prices
- StubAddressChecker verdicts and call recording
- HtmlLetterRenderer content and escaping
- StubAcknowledgementSender outbox and suppression
"""

from unittest.mock import MagicMock

import pytest

from src.core.result import Failure, Success
from src.domain.entities import CheckedAddress, OrderAcknowledgement
from src.domain.enums import AddressValidationError, SendResult
from src.domain.value_objects import (
    EmailAddress,
    GizmoCode,
    HtmlString,
    Price,
    WidgetCode,
)
from src.infrastructure.acknowledgement import (
    HtmlLetterRenderer,
    StubAcknowledgementSender,
)
from src.infrastructure.address import StubAddressChecker
from src.infrastructure.catalog import InMemoryProductCatalog
from tests.conftest import create_address, create_priced_line, create_priced_order


@pytest.mark.unit
class TestInMemoryProductCatalog:
    """Test InMemoryProductCatalog."""

    def test_product_exists(self, catalog):
        assert catalog.product_exists(WidgetCode("W1001")) is True
        assert catalog.product_exists(WidgetCode("W9999")) is False

    def test_get_product_price(self, catalog):
        assert catalog.get_product_price(GizmoCode("G123")) == Price(19.99)

    def test_unknown_product_price_raises(self, catalog):
        with pytest.raises(KeyError):
            catalog.get_product_price(WidgetCode("W9999"))

    def test_out_of_bounds_price_rejected_at_load(self):
        with pytest.raises(ValueError, match="Not expecting Price to be out of bounds"):
            InMemoryProductCatalog({"W1001": 500.0})


@pytest.mark.unit
class TestStubAddressChecker:
    """Test StubAddressChecker."""

    @pytest.mark.asyncio
    async def test_accepts_by_default(self):
        address = create_address()

        result = await StubAddressChecker()(address)

        assert result == Success(value=CheckedAddress(address=address))

    @pytest.mark.asyncio
    async def test_configured_verdicts(self, address_checker):
        not_found = await address_checker(create_address(zipcode="99999"))
        malformed = await address_checker(create_address(zipcode="00000"))

        assert not_found == Failure(error=AddressValidationError.ADDRESS_NOT_FOUND)
        assert malformed == Failure(error=AddressValidationError.INVALID_FORMAT)
        assert len(address_checker.calls) == 2


@pytest.mark.unit
class TestHtmlLetterRenderer:
    """Test HtmlLetterRenderer."""

    def test_letter_contains_order_details(self):
        priced = create_priced_order(
            create_priced_line("W1001", 5, 50.0, "L1"),
            create_priced_line("G123", 2.5, 49.98, "L2"),
        )

        letter = HtmlLetterRenderer("Widgets & Gizmos Ltd")(priced)

        assert isinstance(letter, HtmlString)
        assert "Dear Jane Doe" in letter.value
        assert "ORD-1" in letter.value
        assert "<td>2.5 kg</td>" in letter.value
        assert "Amount to bill: 99.98" in letter.value

    def test_values_are_escaped(self):
        priced = create_priced_order(create_priced_line())

        letter = HtmlLetterRenderer("<Acme>")(priced)

        assert "&lt;Acme&gt;" in letter.value
        assert "<Acme>" not in letter.value


@pytest.mark.unit
class TestStubAcknowledgementSender:
    """Test StubAcknowledgementSender."""

    def _acknowledgement(self, email: str) -> OrderAcknowledgement:
        return OrderAcknowledgement(
            email_address=EmailAddress(email),
            letter=HtmlString("<p>Thanks</p>"),
        )

    def test_sends_and_records(self):
        logger = MagicMock()
        sender = StubAcknowledgementSender(logger)
        acknowledgement = self._acknowledgement("jane@example.com")

        assert sender(acknowledgement) is SendResult.SENT
        assert sender.outbox == [acknowledgement]
        logger.info.assert_called_once()

    def test_suppressed_address_not_sent(self):
        logger = MagicMock()
        sender = StubAcknowledgementSender(logger, suppressed_emails=["Jane@Example.com"])

        result = sender(self._acknowledgement("jane@example.com"))

        assert result is SendResult.NOT_SENT
        assert sender.outbox == []
        logger.warning.assert_called_once_with(
            "acknowledgement_not_sent", email="jane@example.com", reason="suppressed"
        )
