"""Product catalog ports.

The workflow asks the catalog two questions: does a product exist, and what
does it cost. Both are synchronous lookups.

This is a Protocol (not ABC) for structural typing: a plain function with
the right signature satisfies it, and so does a bound method such as
``InMemoryProductCatalog.product_exists``.
"""

from typing import Protocol

from src.domain.value_objects import Price, ProductCode


class CheckProductExists(Protocol):
    """Catalog membership check (port).

    Example:
        >>> def product_exists(code: ProductCode) -> bool:
        ...     return code.value in {"W1001", "G001"}
    """

    def __call__(self, product_code: ProductCode) -> bool:
        """Return True if the product is in the catalog.

        Args:
            product_code: Validated product code.
        """
        ...


class GetProductPrice(Protocol):
    """Unit price lookup (port).

    Assumed total: it is only called for products that passed
    ``CheckProductExists``.
    """

    def __call__(self, product_code: ProductCode) -> Price:
        """Return the unit price of a product.

        Args:
            product_code: Product known to exist.
        """
        ...
