"""Pricing rules: GST per category, order-level discounts and coupons.

Everything here is a pure function of its inputs. Amounts stay in full
Decimal precision; nothing is rounded before display.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from enum import Enum

from ecom.domain.model.product import Category, Product
from ecom.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# GST
# ---------------------------------------------------------------------------
GST_RATES: dict[Category, Decimal] = {
    Category.ELECTRONICS: Decimal("0.18"),
    Category.CLOTHING: Decimal("0.12"),
    Category.GROCERY: Decimal("0.05"),
}


def gst_rate(category: Category) -> Decimal:
    return GST_RATES[category]


def gst_amount(product: Product, quantity: int) -> Money:
    """GST owed on *quantity* units: ``price * quantity * rate``."""
    return product.price * quantity * gst_rate(product.category)


# ---------------------------------------------------------------------------
# Order-level discount
# ---------------------------------------------------------------------------
class Discount(Enum):
    NO_DISCOUNT = ("No Discount", Decimal("1.00"))
    FESTIVAL = ("Festival Discount (10%)", Decimal("0.90"))
    CLEARANCE_SALE = ("Clearance Sale (25%)", Decimal("0.75"))

    def __init__(self, label: str, factor: Decimal) -> None:
        self.label = label
        self.factor = factor

    def apply(self, amount: Money) -> Money:
        return amount * self.factor


# ---------------------------------------------------------------------------
# Payment-stage coupon
# ---------------------------------------------------------------------------
FLAT_COUPON_AMOUNT = Money(Decimal("200"))


class Coupon(Enum):
    SAVE10 = "SAVE10"
    FLAT200 = "FLAT200"

    def apply(self, amount: Money) -> Money:
        if self is Coupon.SAVE10:
            return amount * Decimal("0.90")
        return amount.less(FLAT_COUPON_AMOUNT)

    @staticmethod
    def lookup(code: str | None) -> Coupon | None:
        """Resolve *code* case-insensitively; blank or unknown codes give None."""
        if code is None or not code.strip():
            return None
        try:
            return Coupon(code.strip().upper())
        except ValueError:
            return None


def apply_coupon(amount: Money, code: str | None) -> Money:
    """Apply the coupon named by *code*; anything unrecognised is a no-op."""
    coupon = Coupon.lookup(code)
    if coupon is None:
        if code is not None and code.strip():
            logger.warning("Coupon code %r not recognised, charging full amount", code)
        return amount
    return coupon.apply(amount)
