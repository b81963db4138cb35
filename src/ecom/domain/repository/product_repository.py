"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The catalog is read-only once seeded.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecom.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in catalog order."""
