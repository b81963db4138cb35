"""Interactive shop session — the menu loop behind ``ecom shop``.

One session owns one cart and one order history. Numeric input goes
through ``click.prompt(type=int)``, which re-prompts until it gets an
integer, so the handlers only ever see parsed values.
"""

from __future__ import annotations

import click

from ecom.application.add_to_cart import AddToCartHandler
from ecom.application.checkout import CheckoutHandler
from ecom.application.list_catalog import ListCatalogHandler
from ecom.application.remove_from_cart import RemoveFromCartHandler
from ecom.application.show_cart import ShowCartHandler
from ecom.application.show_history import ShowHistoryHandler
from ecom.domain.exceptions import DomainException
from ecom.domain.model.cart import Cart
from ecom.domain.model.checkout_options import DeliveryMethod, PaymentMethod
from ecom.domain.model.pricing import Discount
from ecom.domain.repository.order_repository import OrderRepository
from ecom.domain.repository.product_repository import ProductRepository
from ecom.infrastructure.cli.rendering import render_cart, render_catalog, render_invoice

MAIN_MENU = [
    "",
    "--- MAIN MENU ---",
    "1. Show catalog",
    "2. Add product to cart",
    "3. Remove product from cart",
    "4. View cart",
    "5. Checkout",
    "6. View order history",
    "0. Exit",
]

# Menu number -> option. Anything else falls back to the default.
DISCOUNT_CHOICES = {
    1: Discount.NO_DISCOUNT,
    2: Discount.FESTIVAL,
    3: Discount.CLEARANCE_SALE,
}
DELIVERY_CHOICES = {
    1: DeliveryMethod.FAST,
    2: DeliveryMethod.NORMAL,
    3: DeliveryMethod.STORE_PICKUP,
}
PAYMENT_CHOICES = {
    1: PaymentMethod.UPI,
    2: PaymentMethod.CARD,
    3: PaymentMethod.NET_BANKING,
}
DELIVERY_MENU_LABELS = {
    DeliveryMethod.FAST: "Fast Delivery",
    DeliveryMethod.NORMAL: "Normal Delivery",
    DeliveryMethod.STORE_PICKUP: "Store Pickup",
}


def _echo_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


def _read_int(prompt: str) -> int:
    return click.prompt(prompt, type=int)


class ShopSession:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        cart: Cart | None = None,
    ) -> None:
        self._cart = cart if cart is not None else Cart()
        self._catalog_size = len(product_repo.list_all())
        self._catalog = ListCatalogHandler(product_repo)
        self._add = AddToCartHandler(product_repo, self._cart)
        self._remove = RemoveFromCartHandler(self._cart)
        self._show_cart = ShowCartHandler(self._cart)
        self._checkout = CheckoutHandler(self._cart, order_repo)
        self._history = ShowHistoryHandler(order_repo)

    def run(self) -> None:
        click.echo("Welcome to Console E-Commerce App (Mini Project)")
        actions = {
            1: self.show_catalog,
            2: self.add_to_cart,
            3: self.remove_from_cart,
            4: self.view_cart,
            5: self.checkout,
            6: self.view_history,
        }
        while True:
            _echo_lines(MAIN_MENU)
            choice = _read_int("Choose an option")
            if choice == 0:
                click.echo("Exiting — Goodbye!")
                return
            action = actions.get(choice)
            if action is None:
                click.echo("Invalid option. Try again.")
                continue
            try:
                action()
            except DomainException as exc:
                click.echo(str(exc))

    # --- Menu actions ---------------------------------------------------------

    def show_catalog(self) -> None:
        _echo_lines(render_catalog(self._catalog.handle()))

    def add_to_cart(self) -> None:
        self.show_catalog()
        position = _read_int("Enter product number to add to cart (0 to cancel)")
        if position <= 0 or position > self._catalog_size:
            click.echo("Cancelled or invalid product number.")
            return
        quantity = _read_int("Enter quantity")
        line = self._add.handle(position, quantity)
        click.echo(f"Added to cart: {line.product_name} x{quantity}")

    def remove_from_cart(self) -> None:
        cart = self._show_cart.handle()
        if cart.is_empty:
            click.echo("Cart is empty.")
            return
        _echo_lines(render_cart(cart))
        position = _read_int("Enter cart item number to remove (0 to cancel)")
        removed = self._remove.handle(position)
        click.echo(f"Removed: {removed}")

    def view_cart(self) -> None:
        _echo_lines(render_cart(self._show_cart.handle()))

    def checkout(self) -> None:
        if self._show_cart.handle().is_empty:
            click.echo("Cart is empty. Add products before checkout.")
            return

        click.echo()
        click.echo("Choose discount option:")
        for number, option in DISCOUNT_CHOICES.items():
            click.echo(f"{number}) {option.label}")
        discount = DISCOUNT_CHOICES.get(_read_int("Select option"), Discount.NO_DISCOUNT)

        click.echo()
        click.echo("Choose delivery method:")
        for number, option in DELIVERY_CHOICES.items():
            click.echo(f"{number}) {DELIVERY_MENU_LABELS[option]}")
        delivery = DELIVERY_CHOICES.get(_read_int("Select option"), DeliveryMethod.NORMAL)

        click.echo()
        click.echo("Choose payment method:")
        for number, option in PAYMENT_CHOICES.items():
            click.echo(f"{number}) {option.label}")
        payment = PAYMENT_CHOICES.get(_read_int("Select option"), PaymentMethod.UPI)

        coupon = click.prompt(
            "Enter coupon code (SAVE10 / FLAT200) or press Enter to skip",
            default="",
            show_default=False,
        ).strip()

        invoice = self._checkout.handle(discount, delivery, payment, coupon or None)
        _echo_lines(render_invoice(invoice))

    def view_history(self) -> None:
        orders = self._history.handle()
        if not orders:
            click.echo("No orders placed yet.")
            return
        click.echo()
        click.echo("--- Order History ---")
        for summary in orders:
            click.echo(str(summary))
