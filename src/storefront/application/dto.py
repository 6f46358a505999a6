"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Amounts are already
formatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed in the cart panel."""

    product_id: int
    title: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the live cart with its totals."""

    items: list[CartLineDTO]
    total_items: int
    total_usd: str
    total_khr: str  # formatted, e.g. "៛184,500"


@dataclass(frozen=True)
class InvoiceLineDTO:
    """Output: one invoice row with both currencies."""

    index: int
    title: str
    quantity: int
    unit_price_usd: str
    unit_price_khr: str
    subtotal_usd: str
    subtotal_khr: str


@dataclass(frozen=True)
class InvoiceDTO:
    """Output: a complete invoice as rendered to the user."""

    store_name: str
    number: int
    issued_at: str
    items: list[InvoiceLineDTO]
    total_items: int
    total_usd: str
    total_khr: str
