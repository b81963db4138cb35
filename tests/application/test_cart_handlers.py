"""Integration tests for the cart use cases.

Uses the in-memory repositories seeded with a small catalog.
"""

import pytest

from ecom.application.add_to_cart import AddToCartHandler
from ecom.application.list_catalog import ListCatalogHandler
from ecom.application.remove_from_cart import RemoveFromCartHandler
from ecom.application.show_cart import ShowCartHandler
from ecom.domain.exceptions import (
    EmptyCartError,
    InvalidQuantityError,
    InvalidSelectionError,
)
from ecom.domain.model.cart import Cart
from ecom.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.builders import laptop, rice, tshirt


def _setup() -> tuple[AddToCartHandler, Cart]:
    product_repo = InMemoryProductRepository([laptop(), tshirt(), rice()])
    cart = Cart()
    return AddToCartHandler(product_repo, cart), cart


class TestListCatalog:

    def test_positions_follow_catalog_order(self):
        handler = ListCatalogHandler(InMemoryProductRepository([laptop(), tshirt(), rice()]))
        products = handler.handle()
        assert [(p.position, p.name) for p in products] == [
            (1, "Laptop"),
            (2, "T-Shirt"),
            (3, "Rice"),
        ]
        assert products[0].price == "Rs 45000.00"
        assert products[2].category == "Grocery"


class TestAddToCart:

    def test_adds_product_by_position(self):
        handler, cart = _setup()
        dto = handler.handle(position=3, quantity=2)
        assert dto.product_name == "Rice"
        assert dto.quantity == 2
        assert dto.subtotal == "Rs 2400.00"
        assert dto.gst == "Rs 120.00"
        assert len(cart) == 1

    def test_adding_twice_merges_lines(self):
        handler, cart = _setup()
        handler.handle(position=1, quantity=2)
        dto = handler.handle(position=1, quantity=3)
        assert dto.quantity == 5
        assert dto.position == 1
        assert len(cart) == 1

    @pytest.mark.parametrize("position", [0, -2, 4])
    def test_invalid_position_rejected(self, position):
        handler, cart = _setup()
        with pytest.raises(InvalidSelectionError, match="Cancelled or invalid product number"):
            handler.handle(position=position, quantity=1)
        assert cart.is_empty

    def test_invalid_quantity_rejected(self):
        handler, cart = _setup()
        with pytest.raises(InvalidQuantityError, match="at least 1"):
            handler.handle(position=1, quantity=0)
        assert cart.is_empty


class TestRemoveFromCart:

    def test_removes_by_position(self):
        handler, cart = _setup()
        handler.handle(1, 1)
        handler.handle(3, 1)
        removed = RemoveFromCartHandler(cart).handle(1)
        assert removed == "Laptop"
        assert [line.product.name for line in cart.lines] == ["Rice"]

    def test_out_of_range_reports_cancellation(self):
        handler, cart = _setup()
        handler.handle(1, 2)
        with pytest.raises(InvalidSelectionError, match="Cancelled"):
            RemoveFromCartHandler(cart).handle(5)
        assert cart.lines[0].quantity == 2

    def test_empty_cart_rejected(self):
        with pytest.raises(EmptyCartError, match="Cart is empty"):
            RemoveFromCartHandler(Cart()).handle(1)


class TestShowCart:

    def test_empty(self):
        assert ShowCartHandler(Cart()).handle().is_empty

    def test_totals(self):
        handler, cart = _setup()
        handler.handle(1, 1)
        handler.handle(3, 2)
        dto = ShowCartHandler(cart).handle()
        assert [(line.position, line.product_name) for line in dto.lines] == [
            (1, "Laptop"),
            (2, "Rice"),
        ]
        assert dto.gst == "Rs 8220.00"
        assert dto.total == "Rs 55620.00"
