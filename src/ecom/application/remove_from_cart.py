"""Application service: Remove From Cart use case."""

from __future__ import annotations

from ecom.domain.exceptions import EmptyCartError
from ecom.domain.model.cart import Cart


class RemoveFromCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, position: int) -> str:
        """Remove the cart line at 1-based *position*; return its product name."""
        if self._cart.is_empty:
            raise EmptyCartError("Cart is empty.")
        return self._cart.remove(position).product.name
