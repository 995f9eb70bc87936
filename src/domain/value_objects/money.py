"""Immutable monetary value objects.

Two bounded amounts are used by the pricing stage:

- Price: a unit price or a line price, between 0.0 and 100.0.
- BillingAmount: the total billed for an order, between 0.0 and 10000.0.

Arithmetic never produces an out-of-bounds value silently: ``Price.multiply``
and ``BillingAmount.sum_prices`` re-validate their result and return a
Failure when the bound is exceeded.

Usage:
    from src.domain.value_objects import BillingAmount, Price

    line_price = Price.multiply(2, Price.unsafe_create(40.0))  # Success(80.0)
    total = BillingAmount.sum_prices([line_price.value])
"""

from collections.abc import Iterable
from dataclasses import dataclass

from src.core.constants import (
    BILLING_AMOUNT_MAX,
    BILLING_AMOUNT_MIN,
    PRICE_MAX,
    PRICE_MIN,
)
from src.core.result import Failure, Result, Success
from src.domain.validators import create_decimal, ensure_valid

PRICE_FIELD = "Price"
BILLING_AMOUNT_FIELD = "BillingAmount"


@dataclass(frozen=True)
class Price:
    """Price of a product or order line.

    Attributes:
        value: Amount between 0.0 and 100.0 (inclusive).

    Immutability:
        Frozen dataclass ensures Price cannot be modified after creation.
        ``multiply`` returns a new Price.

    Example:
        >>> Price.create(19.99)
        Success(value=Price(value=19.99))
        >>> Price.multiply(3, Price.unsafe_create(40.0))
        Failure(error='Price: Must not be greater than 100.0')
    """

    value: float

    def __post_init__(self) -> None:
        """Reject amounts outside the Price bounds.

        Raises:
            ValueError: If the amount is NaN or out of bounds.
        """
        ensure_valid(create_decimal(PRICE_FIELD, PRICE_MIN, PRICE_MAX, self.value))

    @classmethod
    def create(cls, value: float) -> Result["Price", str]:
        """Create a Price, failing outside 0.0..100.0.

        Args:
            value: Raw amount.

        Returns:
            Success(Price) or Failure(message).
        """
        result = create_decimal(PRICE_FIELD, PRICE_MIN, PRICE_MAX, value)
        if isinstance(result, Failure):
            return result
        return Success(value=cls(result.value))

    @classmethod
    def unsafe_create(cls, value: float) -> "Price":
        """Create a Price from trusted data such as the product catalog.

        Args:
            value: Amount expected to be within bounds.

        Returns:
            Price: The new price.

        Raises:
            ValueError: If the amount is out of bounds.
        """
        result = cls.create(value)
        if isinstance(result, Failure):
            raise ValueError(f"Not expecting Price to be out of bounds: {result.error}")
        return result.value

    @classmethod
    def multiply(cls, quantity: float, price: "Price") -> Result["Price", str]:
        """Multiply a price by a quantity.

        Args:
            quantity: Units or kilograms ordered.
            price: Unit price.

        Returns:
            Success(Price) of ``quantity * price``, or Failure(message) when
            the product exceeds the Price bounds.
        """
        return cls.create(quantity * price.value)


@dataclass(frozen=True)
class BillingAmount:
    """Total amount to bill for an order.

    Attributes:
        value: Amount between 0.0 and 10000.0 (inclusive).
    """

    value: float

    def __post_init__(self) -> None:
        """Reject amounts outside the BillingAmount bounds.

        Raises:
            ValueError: If the amount is NaN or out of bounds.
        """
        ensure_valid(
            create_decimal(
                BILLING_AMOUNT_FIELD, BILLING_AMOUNT_MIN, BILLING_AMOUNT_MAX, self.value
            )
        )

    @classmethod
    def create(cls, value: float) -> Result["BillingAmount", str]:
        """Create a BillingAmount, failing outside 0.0..10000.0.

        Args:
            value: Raw amount.

        Returns:
            Success(BillingAmount) or Failure(message).
        """
        result = create_decimal(
            BILLING_AMOUNT_FIELD, BILLING_AMOUNT_MIN, BILLING_AMOUNT_MAX, value
        )
        if isinstance(result, Failure):
            return result
        return Success(value=cls(result.value))

    @classmethod
    def sum_prices(cls, prices: Iterable[Price]) -> Result["BillingAmount", str]:
        """Sum line prices into a billing amount.

        Args:
            prices: Line prices of an order (may be empty).

        Returns:
            Success(BillingAmount) of the total, or Failure(message) when the
            total exceeds the BillingAmount bounds.

        Example:
            >>> BillingAmount.sum_prices([Price(80.0), Price(19.99)])
            Success(value=BillingAmount(value=99.99))
        """
        return cls.create(sum((price.value for price in prices), 0.0))
