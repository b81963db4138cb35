"""Application service: List Catalog use case (query)."""

from __future__ import annotations

from ecom.application.dto import ProductDTO
from ecom.domain.repository.product_repository import ProductRepository


class ListCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO(
                position=position,
                name=product.name,
                price=str(product.price),
                category=product.category.value,
                details=product.details.describe(),
            )
            for position, product in enumerate(self._product_repo.list_all(), start=1)
        ]
