"""Application service: Add To Cart use case.

Products are picked by their 1-based position in the catalog listing,
the same numbers the shop menu shows.
"""

from __future__ import annotations

from ecom.application.dto import CartLineDTO
from ecom.domain.exceptions import InvalidQuantityError, InvalidSelectionError
from ecom.domain.model.cart import Cart
from ecom.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(self, product_repo: ProductRepository, cart: Cart) -> None:
        self._product_repo = product_repo
        self._cart = cart

    def handle(self, position: int, quantity: int) -> CartLineDTO:
        """Add *quantity* units of the product at catalog *position*.

        Both inputs are checked before the cart is touched, so a rejected
        request leaves it exactly as it was.
        """
        products = self._product_repo.list_all()
        if position <= 0 or position > len(products):
            raise InvalidSelectionError("Cancelled or invalid product number.")
        if quantity <= 0:
            raise InvalidQuantityError("Quantity must be at least 1.")

        line = self._cart.add(products[position - 1], quantity)
        return CartLineDTO(
            position=self._cart.lines.index(line) + 1,
            product_name=line.product.name,
            quantity=line.quantity,
            unit_price=str(line.product.price),
            subtotal=str(line.subtotal),
            gst=str(line.gst),
        )
