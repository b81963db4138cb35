"""Application service: Checkout use case.

Turns the live cart into a placed order. Side effects (advancing the
order sequence, recording the order, clearing the cart) happen only
once pricing has succeeded, and an empty cart is turned away before
any of them.
"""

from __future__ import annotations

import logging

from ecom.application.dto import InvoiceDTO, InvoiceLineDTO
from ecom.domain.exceptions import EmptyCartError
from ecom.domain.model.cart import Cart
from ecom.domain.model.checkout_options import DeliveryMethod, PaymentMethod
from ecom.domain.model.invoice import Invoice
from ecom.domain.model.pricing import Discount
from ecom.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, cart: Cart, order_repo: OrderRepository) -> None:
        self._cart = cart
        self._order_repo = order_repo

    def handle(
        self,
        discount: Discount,
        delivery: DeliveryMethod,
        payment: PaymentMethod,
        coupon_code: str | None = None,
    ) -> InvoiceDTO:
        """Place an order for everything in the cart.

        Steps:
        1. Reject an empty cart.
        2. Price a snapshot of the cart lines.
        3. Record the invoice (which assigns its order ID), then clear the cart.
        """
        if self._cart.is_empty:
            raise EmptyCartError("Cart is empty. Add products before checkout.")

        invoice = Invoice.create(
            lines=self._cart.lines,
            discount=discount,
            delivery=delivery,
            payment=payment,
            coupon_code=coupon_code,
        )
        invoice = self._order_repo.save(invoice)
        self._cart.clear()

        logger.info(
            "Order #%d placed: %d line(s), paid %s via %s",
            invoice.order_id,
            len(invoice.lines),
            invoice.amount_paid,
            invoice.payment.method_label,
        )
        return self._to_dto(invoice)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(invoice: Invoice) -> InvoiceDTO:
        return InvoiceDTO(
            order_id=invoice.order_id,
            lines=[
                InvoiceLineDTO(
                    product_name=line.product.name,
                    quantity=line.quantity,
                    unit_price=str(line.unit_price),
                    subtotal=str(line.subtotal),
                    gst=str(line.gst),
                    details=line.product.details.describe(),
                )
                for line in invoice.lines
            ],
            subtotal=str(invoice.subtotal),
            total_gst=str(invoice.total_gst),
            pre_discount_total=str(invoice.pre_discount_total),
            discount_name=invoice.discount.label if invoice.has_discount else None,
            post_discount_total=str(invoice.post_discount_total),
            coupon_code=invoice.coupon_code,
            amount_paid=str(invoice.amount_paid),
            payment_confirmation=invoice.payment.confirmation(),
            delivery=invoice.delivery.description,
        )
