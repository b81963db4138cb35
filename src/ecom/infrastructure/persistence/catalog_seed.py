"""The catalog every session starts with."""

from __future__ import annotations

from decimal import Decimal

from ecom.domain.model.product import (
    ClothingDetails,
    ElectronicsDetails,
    GroceryDetails,
    Product,
)


def seed_products() -> list[Product]:
    return [
        Product.create("1", "Laptop", "45000", ElectronicsDetails("Lenovo", 2)),
        Product.create("2", "Smartphone", "22000", ElectronicsDetails("Samsung", 1)),
        Product.create("3", "T-Shirt", "799", ClothingDetails("Cotton", 40)),
        Product.create("4", "Jeans", "1499", ClothingDetails("Denim", 32)),
        Product.create("5", "Rice", "1200", GroceryDetails(2026, Decimal("5000"))),
        Product.create("6", "Face Wash", "250", GroceryDetails(2025, Decimal("100"))),
    ]
