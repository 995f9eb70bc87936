"""Unit tests for the pricing stage of the place order workflow.

Tests cover:
- Line price = unit price x quantity
- Line price over the Price bound fails the stage
- Total over the BillingAmount bound fails the stage
- Pricing is all-or-nothing (no partial PricedOrder)
"""

import pytest

from src.application.workflows.place_order import price_order, to_priced_order_line
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.errors import PricingError
from src.domain.value_objects import Price
from tests.conftest import create_validated_line, create_validated_order


def prices(**table: float):
    def get_product_price(code):
        return Price.unsafe_create(table[code.value])

    return get_product_price


@pytest.mark.unit
class TestPriceOrderLine:
    """Test to_priced_order_line."""

    def test_line_price_is_quantity_times_unit_price(self):
        result = to_priced_order_line(
            prices(W2040=40.0), create_validated_line("W2040", 2)
        )

        assert isinstance(result, Success)
        assert result.value.line_price == Price(80.0)

    def test_line_price_over_bound_fails(self):
        result = to_priced_order_line(
            prices(W2040=40.0), create_validated_line("W2040", 3)
        )

        assert result == Failure(
            error=PricingError(
                code=ErrorCode.PRICING_FAILED,
                message="Price: Must not be greater than 100.0",
            )
        )

    def test_gizmo_line_uses_kilograms(self):
        result = to_priced_order_line(
            prices(G500=2.5), create_validated_line("G500", 1.5)
        )

        assert result.value.line_price.value == pytest.approx(3.75)


@pytest.mark.unit
class TestPriceOrder:
    """Test price_order."""

    def test_amount_to_bill_is_sum_of_lines(self):
        order = create_validated_order(
            create_validated_line("W2040", 2, "L1"),
            create_validated_line("G123", 1, "L2"),
        )

        result = price_order(prices(W2040=40.0, G123=19.99), order)

        assert isinstance(result, Success)
        assert result.value.amount_to_bill.value == pytest.approx(99.99)
        assert [line.orderline_id.value for line in result.value.lines] == ["L1", "L2"]

    def test_order_without_lines_bills_zero(self):
        result = price_order(prices(), create_validated_order())

        assert result.value.amount_to_bill.value == 0.0
        assert result.value.lines == ()

    def test_any_failing_line_fails_the_order(self):
        order = create_validated_order(
            create_validated_line("W1001", 1, "L1"),
            create_validated_line("W1002", 5, "L2"),
        )

        result = price_order(prices(W1001=10.0, W1002=25.0), order)

        assert isinstance(result, Failure)
        assert isinstance(result.error, PricingError)

    def test_total_over_billing_bound_fails(self):
        lines = [create_validated_line("W1001", 50, f"L{i}") for i in range(101)]
        order = create_validated_order(*lines)

        result = price_order(prices(W1001=2.0), order)

        assert result == Failure(
            error=PricingError(
                code=ErrorCode.PRICING_FAILED,
                message="BillingAmount: Must not be greater than 10000.0",
            )
        )
