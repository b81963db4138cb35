"""Invoice aggregate — the priced, immutable result of one checkout.

``Invoice.create()`` folds a snapshot of the cart into totals in a fixed
order: line subtotals and GST, then the order-level discount, then the
payment-stage coupon. The invoice is never modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from ecom.domain.exceptions import EmptyCartError
from ecom.domain.model.cart import CartLine
from ecom.domain.model.checkout_options import (
    DeliveryMethod,
    PaymentMethod,
    PaymentReceipt,
)
from ecom.domain.model.pricing import Discount, gst_amount
from ecom.domain.model.product import Product
from ecom.domain.model.value_objects import Money


@dataclass(frozen=True)
class InvoiceLine:
    """Snapshot of a cart line at checkout time."""

    product: Product
    quantity: int
    unit_price: Money
    subtotal: Money
    gst: Money

    @staticmethod
    def from_cart_line(line: CartLine) -> InvoiceLine:
        product = line.product
        return InvoiceLine(
            product=product,
            quantity=line.quantity,
            unit_price=product.price,
            subtotal=product.price * line.quantity,
            gst=gst_amount(product, line.quantity),
        )


@dataclass(frozen=True)
class Invoice:
    """Priced order. ``order_id`` is None until the order repository places it."""

    order_id: int | None
    lines: tuple[InvoiceLine, ...]
    subtotal: Money
    total_gst: Money
    pre_discount_total: Money
    discount: Discount
    post_discount_total: Money
    coupon_code: str | None
    amount_paid: Money
    payment: PaymentReceipt
    delivery: DeliveryMethod

    @staticmethod
    def create(
        lines: Iterable[CartLine],
        discount: Discount,
        delivery: DeliveryMethod,
        payment: PaymentMethod,
        coupon_code: str | None = None,
        order_id: int | None = None,
    ) -> Invoice:
        """Price an order.

        The caller is expected to reject an empty cart first; an empty
        *lines* is still refused here rather than producing a zero invoice.
        """
        snapshot = tuple(InvoiceLine.from_cart_line(line) for line in lines)
        if not snapshot:
            raise EmptyCartError("Cart is empty. Add products before checkout.")

        subtotal = Money.zero()
        total_gst = Money.zero()
        for line in snapshot:
            subtotal = subtotal + line.subtotal
            total_gst = total_gst + line.gst

        pre_discount_total = subtotal + total_gst
        post_discount_total = discount.apply(pre_discount_total)

        # The coupon is applied by the payment step, strictly after the discount
        receipt = payment.pay(post_discount_total, coupon_code)

        return Invoice(
            order_id=order_id,
            lines=snapshot,
            subtotal=subtotal,
            total_gst=total_gst,
            pre_discount_total=pre_discount_total,
            discount=discount,
            post_discount_total=post_discount_total,
            coupon_code=receipt.coupon,
            amount_paid=receipt.amount_charged,
            payment=receipt,
            delivery=delivery,
        )

    def with_order_id(self, order_id: int) -> Invoice:
        return replace(self, order_id=order_id)

    @property
    def has_discount(self) -> bool:
        return self.discount is not Discount.NO_DISCOUNT
