"""In-memory product catalog.

Serves both catalog ports from a single price list keyed by product code.
Prices are trusted data, so they are converted with ``Price.unsafe_create``
and an out-of-bounds entry is a configuration bug that raises.

Usage:
    catalog = InMemoryProductCatalog({"W1001": 10.0, "G001": 2.5})
    handler = PlaceOrderHandler(
        check_product_exists=catalog.product_exists,
        get_product_price=catalog.get_product_price,
        ...
    )
"""

from collections.abc import Mapping

from src.domain.value_objects import Price, ProductCode, product_code_value


class InMemoryProductCatalog:
    """Price list backed catalog.

    Attributes:
        _prices: Unit price per product code string.
    """

    def __init__(self, prices: Mapping[str, float]) -> None:
        """Initialize the catalog.

        Args:
            prices: Unit price per product code (e.g. {"W1001": 10.0}).

        Raises:
            ValueError: If any price is outside the Price bounds.
        """
        self._prices: dict[str, Price] = {
            code: Price.unsafe_create(price) for code, price in prices.items()
        }

    def __len__(self) -> int:
        return len(self._prices)

    def product_exists(self, product_code: ProductCode) -> bool:
        """Return True if the catalog carries the product."""
        return product_code_value(product_code) in self._prices

    def get_product_price(self, product_code: ProductCode) -> Price:
        """Return the unit price of a product.

        Args:
            product_code: Product already known to exist.

        Returns:
            Price: Unit price.

        Raises:
            KeyError: If the product is not in the catalog.
        """
        return self._prices[product_code_value(product_code)]
