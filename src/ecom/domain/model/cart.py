"""Shopping cart — the live, mutable selection before checkout.

The cart owns its lines; lines reference catalog products and never copy
them. There is one line per product name, kept in insertion order.
"""

from __future__ import annotations

import logging

from ecom.domain.exceptions import InvalidQuantityError, InvalidSelectionError
from ecom.domain.model.pricing import gst_amount
from ecom.domain.model.product import Product
from ecom.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class CartLine:
    """A product and how many units of it are in the cart.

    Quantity is clamped to a minimum of 1 on construction and on every
    update.
    """

    def __init__(self, product: Product, quantity: int) -> None:
        self.product = product
        self.quantity = quantity

    @property
    def quantity(self) -> int:
        return self._quantity

    @quantity.setter
    def quantity(self, value: int) -> None:
        self._quantity = max(1, value)

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity

    @property
    def gst(self) -> Money:
        return gst_amount(self.product, self.quantity)

    def __repr__(self) -> str:
        return f"CartLine(product={self.product.name!r}, quantity={self.quantity})"


class Cart:

    def __init__(self) -> None:
        self._lines: list[CartLine] = []

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int) -> CartLine:
        """Add *quantity* units of *product*.

        If a line for the same product name already exists its quantity is
        increased instead of creating a second line.
        """
        if quantity <= 0:
            raise InvalidQuantityError("Quantity must be at least 1.")

        existing = self._find_line(product.name)
        if existing is not None:
            existing.quantity = existing.quantity + quantity
            logger.info("Cart: %s quantity now %d", product.name, existing.quantity)
            return existing

        line = CartLine(product, quantity)
        self._lines.append(line)
        logger.info("Cart: added %s x%d", product.name, quantity)
        return line

    def remove(self, position: int) -> CartLine:
        """Remove the line at 1-based *position*."""
        if position <= 0 or position > len(self._lines):
            raise InvalidSelectionError("Cancelled or invalid number.")
        line = self._lines.pop(position - 1)
        logger.info("Cart: removed %s", line.product.name)
        return line

    def clear(self) -> None:
        self._lines.clear()

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.subtotal
        return result

    @property
    def gst(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.gst
        return result

    @property
    def total(self) -> Money:
        """Subtotal plus GST, before any discount."""
        return self.subtotal + self.gst

    # --- Internal helpers -----------------------------------------------------

    def _find_line(self, product_name: str) -> CartLine | None:
        for line in self._lines:
            if line.product.name == product_name:
                return line
        return None
