"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from ecom.application.dto import CartDTO, CartLineDTO
from ecom.domain.model.cart import Cart


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return CartDTO(
            lines=[
                CartLineDTO(
                    position=position,
                    product_name=line.product.name,
                    quantity=line.quantity,
                    unit_price=str(line.product.price),
                    subtotal=str(line.subtotal),
                    gst=str(line.gst),
                )
                for position, line in enumerate(self._cart.lines, start=1)
            ],
            gst=str(self._cart.gst),
            total=str(self._cart.total),
        )
