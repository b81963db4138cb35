"""In-memory implementation of ProductRepository.

Nothing is persisted across runs; the catalog is seeded at startup.
"""

from __future__ import annotations

from ecom.domain.model.product import Product
from ecom.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: tuple[Product, ...] = tuple(products or [])

    def list_all(self) -> list[Product]:
        return list(self._products)
