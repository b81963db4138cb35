"""Tests for the in-memory repositories and the seeded catalog."""

import pytest

from ecom.domain.exceptions import ValidationError
from ecom.domain.model.checkout_options import DeliveryMethod, PaymentMethod
from ecom.domain.model.invoice import Invoice
from ecom.domain.model.pricing import Discount
from ecom.infrastructure.persistence.catalog_seed import seed_products
from ecom.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from ecom.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.builders import cart_with, laptop


def _invoice() -> Invoice:
    return Invoice.create(
        lines=cart_with((laptop(), 1)).lines,
        discount=Discount.NO_DISCOUNT,
        delivery=DeliveryMethod.NORMAL,
        payment=PaymentMethod.UPI,
    )


class TestProductRepository:

    def test_seeded_catalog_order(self):
        repo = InMemoryProductRepository(seed_products())
        assert [p.name for p in repo.list_all()] == [
            "Laptop",
            "Smartphone",
            "T-Shirt",
            "Jeans",
            "Rice",
            "Face Wash",
        ]

    def test_list_is_a_copy(self):
        repo = InMemoryProductRepository(seed_products())
        repo.list_all().clear()
        assert len(repo.list_all()) == 6


class TestOrderRepository:

    def test_save_assigns_increasing_ids(self):
        repo = InMemoryOrderRepository()
        placed = [repo.save(_invoice()) for _ in range(3)]
        assert [invoice.order_id for invoice in placed] == [1, 2, 3]

    def test_unplaced_invoice_has_no_id(self):
        assert _invoice().order_id is None

    def test_list_all_in_placement_order(self):
        repo = InMemoryOrderRepository()
        first = repo.save(_invoice())
        second = repo.save(_invoice())
        assert repo.list_all() == [first, second]

    def test_already_placed_invoice_rejected(self):
        repo = InMemoryOrderRepository()
        placed = repo.save(_invoice())
        with pytest.raises(ValidationError, match="already been placed"):
            repo.save(placed)
        assert len(repo.list_all()) == 1
        assert repo.save(_invoice()).order_id == 2
