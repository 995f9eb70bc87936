"""Unit tests for acknowledgement and event creation.

Tests cover:
- Letter always rendered, delivery always attempted
- AcknowledgementSent iff delivery reports SENT
- BillableOrderPlaced iff amount_to_bill > 0
- Event order: acknowledgement, order placed, billing
"""

import pytest

from src.application.workflows.place_order import (
    acknowledge_order,
    create_billing_event,
    create_events,
    create_order_placed_event,
)
from src.domain.enums import SendResult
from src.domain.events import AcknowledgementSent, BillableOrderPlaced, OrderPlaced
from src.domain.value_objects import HtmlString
from tests.conftest import (
    create_priced_line,
    create_priced_order,
    render_letter,
    send_not_sent,
    send_ok,
)


@pytest.mark.unit
class TestAcknowledgeOrder:
    """Test acknowledge_order."""

    def test_sent_produces_event(self):
        priced = create_priced_order(create_priced_line())

        event = acknowledge_order(render_letter, send_ok, priced)

        assert isinstance(event, AcknowledgementSent)
        assert event.order_id == priced.order_id
        assert event.email_address.value == "jane@example.com"

    def test_not_sent_produces_no_event(self):
        priced = create_priced_order(create_priced_line())

        assert acknowledge_order(render_letter, send_not_sent, priced) is None

    def test_letter_is_rendered_and_delivered_even_when_not_sent(self):
        priced = create_priced_order(create_priced_line())
        delivered = []

        def send(acknowledgement):
            delivered.append(acknowledgement)
            return SendResult.NOT_SENT

        acknowledge_order(render_letter, send, priced)

        assert len(delivered) == 1
        assert delivered[0].letter == HtmlString("<p>Order ORD-1</p>")
        assert delivered[0].email_address == priced.customer_info.email_address


@pytest.mark.unit
class TestCreateEvents:
    """Test billing event and event list assembly."""

    def test_billing_event_for_positive_amount(self):
        priced = create_priced_order(create_priced_line(line_price=50.0))

        event = create_billing_event(priced)

        assert isinstance(event, BillableOrderPlaced)
        assert event.amount_to_bill.value == 50.0
        assert event.billing_address == priced.billing_address

    def test_no_billing_event_for_zero_amount(self):
        priced = create_priced_order(create_priced_line(line_price=0.0))

        assert create_billing_event(priced) is None

    def test_order_placed_wraps_priced_order(self):
        priced = create_priced_order(create_priced_line())

        event = create_order_placed_event(priced)

        assert event.priced_order is priced
        assert event.order_id == priced.order_id

    def test_full_event_order(self):
        priced = create_priced_order(create_priced_line())
        ack = acknowledge_order(render_letter, send_ok, priced)

        events = create_events(priced, ack)

        assert [type(event) for event in events] == [
            AcknowledgementSent,
            OrderPlaced,
            BillableOrderPlaced,
        ]

    def test_order_placed_always_present(self):
        priced = create_priced_order(create_priced_line(line_price=0.0))

        events = create_events(priced, None)

        assert [type(event) for event in events] == [OrderPlaced]

    def test_events_have_distinct_ids(self):
        priced = create_priced_order(create_priced_line())

        events = create_events(priced, acknowledge_order(render_letter, send_ok, priced))

        assert len({event.event_id for event in events}) == 3
