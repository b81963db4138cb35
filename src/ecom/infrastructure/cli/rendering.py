"""Text rendering for catalog, cart and invoice output.

Functions return lists of lines so they can be echoed by click or
inspected directly.
"""

from __future__ import annotations

from ecom.application.dto import CartDTO, InvoiceDTO, ProductDTO

INVOICE_BANNER = "================= INVOICE ================="
CLOSING_BANNER = "==========================================="
LINE_SEPARATOR = "-" * 38
CATALOG_SEPARATOR = "-" * 32
DETAIL_LABEL_WIDTH = 9


def _detail_rows(details: list[tuple[str, str]]) -> list[str]:
    width = max([DETAIL_LABEL_WIDTH] + [len(label) for label, _ in details])
    return [f"{label:<{width}}: {value}" for label, value in details]


def render_catalog(products: list[ProductDTO]) -> list[str]:
    lines = ["", "--- CATALOG ---"]
    for product in products:
        lines.append(f"{product.position}) {product.name} - {product.price}")
        lines.extend(_detail_rows(product.details))
        lines.append(CATALOG_SEPARATOR)
    return lines


def render_cart(cart: CartDTO) -> list[str]:
    if cart.is_empty:
        return ["Your cart is empty."]

    lines = ["", "--- CART ---"]
    for line in cart.lines:
        lines.append(
            f"{line.position}) {line.product_name} x{line.quantity}  "
            f"@ {line.unit_price} each  Subtotal: {line.subtotal}  GST: {line.gst}"
        )
    lines.append(f"Cart total (without discount): {cart.total} (GST: {cart.gst})")
    return lines


def render_invoice(invoice: InvoiceDTO) -> list[str]:
    lines = ["", INVOICE_BANNER, f"Order ID: {invoice.order_id}", "", "Items:"]

    for item in invoice.lines:
        lines.append(
            f"- {item.product_name} x{item.quantity}   @ {item.unit_price} each   "
            f"Subtotal: {item.subtotal}   GST: {item.gst}"
        )
        lines.extend(_detail_rows(item.details))
        lines.append(LINE_SEPARATOR)

    lines.append(f"Subtotal: {invoice.subtotal}")
    lines.append(f"Total GST: {invoice.total_gst}")
    lines.append(f"Total before discount: {invoice.pre_discount_total}")
    if invoice.discount_name is not None:
        lines.append(f"Discount applied: {invoice.discount_name}")
    lines.append(f"Final amount to pay: {invoice.post_discount_total}")
    lines.append(invoice.payment_confirmation)
    lines.append(f"Delivery: {invoice.delivery}")
    lines.append("Order placed successfully. Thank you!")
    lines.append(CLOSING_BANNER)
    lines.append("")
    return lines
