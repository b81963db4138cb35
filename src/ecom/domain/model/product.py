"""Product catalog entries.

Products are read-only once created: the catalog is seeded at startup and
cart lines only hold references to its entries. Each product carries the
attribute record of exactly one category, and the category decides which
GST rate applies (see ``ecom.domain.model.pricing``).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

from ecom.domain.exceptions import ValidationError
from ecom.domain.model.value_objects import Money


class Category(Enum):
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    GROCERY = "Grocery"


@dataclass(frozen=True)
class ElectronicsDetails:
    brand: str
    warranty_years: int

    @property
    def category(self) -> Category:
        return Category.ELECTRONICS

    def describe(self) -> list[tuple[str, str]]:
        return [
            ("Type", self.category.value),
            ("Brand", self.brand),
            ("Warranty", f"{self.warranty_years} year(s)"),
        ]


@dataclass(frozen=True)
class ClothingDetails:
    fabric: str
    size: int

    @property
    def category(self) -> Category:
        return Category.CLOTHING

    def describe(self) -> list[tuple[str, str]]:
        return [
            ("Type", self.category.value),
            ("Cloth", self.fabric),
            ("Size", str(self.size)),
        ]


@dataclass(frozen=True)
class GroceryDetails:
    expiry_year: int
    weight_in_grams: Decimal

    @property
    def category(self) -> Category:
        return Category.GROCERY

    def describe(self) -> list[tuple[str, str]]:
        return [
            ("Type", self.category.value),
            ("Expiry Year", str(self.expiry_year)),
            ("Weight", f"{self.weight_in_grams:.1f} g"),
        ]


ProductDetails = Union[ElectronicsDetails, ClothingDetails, GroceryDetails]


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Frozen: price and attributes never change during a run, so every cart
    line and invoice that references a product sees the same values.
    """

    id: str
    name: str
    price: Money
    details: ProductDetails

    @property
    def category(self) -> Category:
        return self.details.category

    @staticmethod
    def create(
        id: str,
        name: str,
        price: str | int | Decimal,
        details: ProductDetails,
    ) -> Product:
        """Create a catalog entry, enforcing naming and pricing rules."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(details, (ElectronicsDetails, ClothingDetails, GroceryDetails)):
            raise ValidationError(
                f"Unsupported product details: {type(details).__name__}"
            )
        return Product(id=id, name=name.strip(), price=Money.of(price), details=details)
