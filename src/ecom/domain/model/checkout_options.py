"""Delivery and payment choices offered at checkout.

Both are closed sets. Delivery is a display label only; payment applies
the coupon (if any) to the amount it is asked to charge and always
succeeds, since no real gateway sits behind it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ecom.domain.model.pricing import apply_coupon
from ecom.domain.model.value_objects import Money


class DeliveryMethod(Enum):
    FAST = "Fast Delivery (arrives within 1 day)"
    NORMAL = "Normal Delivery (3–4 days)"
    STORE_PICKUP = "Store Pickup - collect from nearest store"

    @property
    def description(self) -> str:
        return self.value


@dataclass(frozen=True)
class PaymentReceipt:
    """Confirmation of a simulated payment."""

    method_label: str
    amount_charged: Money
    coupon: str | None = None

    def confirmation(self) -> str:
        if self.coupon is None:
            return f"{self.method_label} payment successful. Paid: {self.amount_charged}"
        return (
            f"{self.method_label} payment successful with coupon "
            f"'{self.coupon}'. Paid: {self.amount_charged}"
        )


class PaymentMethod(Enum):
    UPI = "UPI"
    CARD = "Card"
    NET_BANKING = "NetBanking"

    @property
    def label(self) -> str:
        return self.value

    def pay(self, amount: Money, coupon: str | None = None) -> PaymentReceipt:
        """Charge *amount*, applying *coupon* first when one is given.

        A missing or blank coupon behaves exactly like paying without one:
        the receipt carries no coupon label.
        """
        if coupon is None or not coupon.strip():
            return PaymentReceipt(method_label=self.label, amount_charged=amount)
        code = coupon.strip()
        return PaymentReceipt(
            method_label=self.label,
            amount_charged=apply_coupon(amount, code),
            coupon=code,
        )
