"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is pre-formatted,
e.g. "Rs 45000.00".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: one catalog entry as listed to the user."""

    position: int
    name: str
    price: str
    category: str
    details: list[tuple[str, str]]


@dataclass(frozen=True)
class CartLineDTO:
    position: int
    product_name: str
    quantity: int
    unit_price: str
    subtotal: str
    gst: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    gst: str
    total: str  # subtotal + GST, before discount

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class InvoiceLineDTO:
    product_name: str
    quantity: int
    unit_price: str
    subtotal: str
    gst: str
    details: list[tuple[str, str]]


@dataclass(frozen=True)
class InvoiceDTO:
    """Output: a placed order, ready to print."""

    order_id: int
    lines: list[InvoiceLineDTO]
    subtotal: str
    total_gst: str
    pre_discount_total: str
    discount_name: str | None  # None when no discount was applied
    post_discount_total: str
    coupon_code: str | None
    amount_paid: str
    payment_confirmation: str
    delivery: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    order_id: int
    total: str  # cart total with GST, before discount and coupon

    def __str__(self) -> str:
        return f"Order ID {self.order_id} - {self.total}"
