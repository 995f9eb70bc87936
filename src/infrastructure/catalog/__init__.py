"""Product catalog adapters.

- InMemoryProductCatalog: price list in memory, serves CheckProductExists
  and GetProductPrice through its bound methods
- Use src.core.container.get_product_catalog() for dependency injection
"""

from src.infrastructure.catalog.in_memory_catalog import InMemoryProductCatalog

__all__ = ["InMemoryProductCatalog"]
