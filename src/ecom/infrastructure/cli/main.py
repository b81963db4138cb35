import click

from ecom.application.list_catalog import ListCatalogHandler
from ecom.infrastructure.bootstrap import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
    configure_logging,
    order_repository,
    product_repository,
)
from ecom.infrastructure.cli.rendering import render_catalog
from ecom.infrastructure.cli.shop_session import ShopSession


@click.group()
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV_VAR,
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity (written to stderr).",
)
def cli(log_level: str) -> None:
    """ECOM — Console E-Commerce checkout"""
    configure_logging(log_level)


@cli.command("catalog")
def catalog() -> None:
    """List the products on sale."""
    handler = ListCatalogHandler(product_repo=product_repository())
    for line in render_catalog(handler.handle()):
        click.echo(line)


@cli.command("shop")
def shop() -> None:
    """Start an interactive shopping session."""
    session = ShopSession(
        product_repo=product_repository(),
        order_repo=order_repository(),
    )
    session.run()
