import logging

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import load_settings
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_qty,
    cart_remove,
    cart_show,
    checkout,
)
from storefront.infrastructure.cli.product_commands import product_list


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Storefront — catalog, cart and invoices in USD and KHR"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        ctx.obj = load_settings()
    except DomainException as exc:
        raise click.ClickException(str(exc))


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


# Register subcommands
product.add_command(product_list)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_qty)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cli.add_command(checkout)
