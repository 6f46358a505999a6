"""CLI commands for browsing the product catalog."""

from __future__ import annotations

import asyncio

import click

from storefront.application.catalog import CATEGORIES, FilterProductsHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Settings, catalog


@click.command("list")
@click.option(
    "--category",
    type=click.Choice(CATEGORIES),
    default=None,
    help="Only show products in this category.",
)
@click.option("--search", default="", help="Case-insensitive title search.")
@click.pass_obj
def product_list(settings: Settings, category: str | None, search: str) -> None:
    """List products from the remote catalog."""
    loader = catalog(settings)
    products = asyncio.run(loader.handle())

    try:
        products = FilterProductsHandler().handle(products, category=category, search_term=search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<30} {'Category':<10} {'Price':>10}")
    click.echo("-" * 59)
    for p in products:
        click.echo(f"{p.id:<6} {p.title[:30]:<30} {p.category or '':<10} {str(p.price):>10}")
