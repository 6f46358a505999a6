"""Plain-text rendering of cart and invoice DTOs."""

from __future__ import annotations

import click

from storefront.application.dto import CartDTO, InvoiceDTO


def display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<30} {'Qty':>5} {'Price':>10} {'Total':>12}")
    click.echo(f"  {'-'*67}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.title[:30]:<30} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*67}")
    click.echo(f"  {'Items':<43} {dto.total_items:>24}")
    click.echo(f"  {'Total (USD)':<43} {dto.total_usd:>24}")
    click.echo(f"  {'Total (KHR)':<43} {dto.total_khr:>24}")


def display_invoice(dto: InvoiceDTO) -> None:
    click.echo(f"{dto.store_name} — Official Invoice Receipt")
    click.echo(f"Invoice #: {dto.number}")
    click.echo(f"Date:      {dto.issued_at}")
    click.echo("Status:    Paid")
    click.echo()
    click.echo(
        f"  {'#':>3} {'Product':<30} {'Qty':>5} {'Unit Price':>12} {'':>10} "
        f"{'Subtotal':>12} {'':>12}"
    )
    click.echo(f"  {'-'*90}")
    for item in dto.items:
        click.echo(
            f"  {item.index:>3} {item.title[:30]:<30} {item.quantity:>5} "
            f"{item.unit_price_usd:>12} {item.unit_price_khr:>10} "
            f"{item.subtotal_usd:>12} {item.subtotal_khr:>12}"
        )
    click.echo(f"  {'-'*90}")
    click.echo(f"  {'Total items':<40} {dto.total_items:>49}")
    click.echo(f"  {'Total (USD)':<40} {dto.total_usd:>49}")
    click.echo(f"  {'Total (KHR)':<40} {dto.total_khr:>49}")
    click.echo()
    click.echo(f"Thank you for shopping with {dto.store_name}!")
