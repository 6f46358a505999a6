"""CLI commands for the shopping cart."""

from __future__ import annotations

import asyncio

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.build_invoice import BuildInvoiceHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Settings, cart_store, catalog
from storefront.infrastructure.cli.rendering import display_cart, display_invoice


@click.command("show")
@click.pass_obj
def cart_show(settings: Settings) -> None:
    """Show the cart with USD and KHR totals."""
    store = cart_store(settings)
    try:
        display_cart(ShowCartHandler(store).handle())
    finally:
        store.dispose()


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Catalog product ID.")
@click.pass_obj
def cart_add(settings: Settings, product_id: int) -> None:
    """Add one unit of a catalog product to the cart."""
    store = cart_store(settings)
    handler = AddToCartHandler(cart_store=store, catalog=catalog(settings))

    try:
        product = asyncio.run(handler.handle(product_id))
        line = store.get_line(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    finally:
        store.dispose()

    click.echo(f"'{product.title}' added to cart (qty={line.qty if line else 0})")


@click.command("qty")
@click.option("--id", "product_id", required=True, type=int, help="Product ID in the cart.")
@click.option("--delta", required=True, type=int, help="Amount to add (negative to reduce).")
@click.pass_obj
def cart_qty(settings: Settings, product_id: int, delta: int) -> None:
    """Change the quantity of a cart line; at zero the line is removed."""
    store = cart_store(settings)
    try:
        if store.get_line(product_id) is None:
            click.echo(f"Product #{product_id} is not in the cart.")
            return
        store.change_qty(product_id, delta)
        line = store.get_line(product_id)
    finally:
        store.dispose()

    if line is None:
        click.echo(f"Product #{product_id} removed from cart.")
    else:
        click.echo(f"Product #{product_id} quantity set to {line.qty}.")


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID in the cart.")
@click.pass_obj
def cart_remove(settings: Settings, product_id: int) -> None:
    """Remove a product from the cart."""
    store = cart_store(settings)
    try:
        store.remove(product_id)
    finally:
        store.dispose()

    click.echo(f"Product #{product_id} removed from cart.")


@click.command("clear")
@click.pass_obj
def cart_clear(settings: Settings) -> None:
    """Empty the cart."""
    store = cart_store(settings)
    try:
        store.clear_cart()
    finally:
        store.dispose()

    click.echo("Cart cleared.")


@click.command("checkout")
@click.pass_obj
def checkout(settings: Settings) -> None:
    """Print the invoice for the cart and clear it."""
    store = cart_store(settings)
    handler = CheckoutHandler(
        cart_store=store,
        invoice_handler=BuildInvoiceHandler(store_name=settings.store_name),
    )

    try:
        invoice = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    finally:
        store.dispose()

    display_invoice(invoice)
