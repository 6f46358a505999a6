"""Domain service: cart pricing.

Pure functions of a cart snapshot.  Nothing here mutates its input or
touches storage, so the live cart view and the invoice can recompute
totals as often as they like.

KHR amounts follow the riel rounding rule: convert at a fixed rate, then
round to the nearest 100 riel (half away from zero).  Conversion always
happens before rounding.

Per-line KHR subtotals are rounded independently of the grand total,
which is rounded once from the summed USD amount.  The two can disagree
in the hundreds digit; the invoice shows both as computed here.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, NamedTuple

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import KHR, USD, Money

KHR_PER_USD = Decimal("4100")
KHR_ROUNDING_STEP = Decimal("100")


class CartTotals(NamedTuple):
    """Derived totals of a cart snapshot."""

    total_items: int
    total_usd: Money
    total_khr: Money


def to_khr(amount: Money) -> Money:
    """Convert a USD amount to riel, rounded to the nearest 100."""
    if amount.currency != USD:
        raise ValidationError(f"Expected a {USD} amount, got {amount.currency}")
    converted = amount.amount * KHR_PER_USD
    steps = (converted / KHR_ROUNDING_STEP).to_integral_value(rounding=ROUND_HALF_UP)
    return Money(steps * KHR_ROUNDING_STEP, KHR)


def total_usd(snapshot: Iterable[CartLineItem]) -> Money:
    result = Money.zero(USD)
    for item in snapshot:
        result = result + line_subtotal_usd(item)
    return result


def total_items(snapshot: Iterable[CartLineItem]) -> int:
    return sum(item.qty for item in snapshot)


def total_khr(snapshot: Iterable[CartLineItem]) -> Money:
    return to_khr(total_usd(snapshot))


def line_subtotal_usd(item: CartLineItem) -> Money:
    return item.price * item.qty


def line_subtotal_khr(item: CartLineItem) -> Money:
    """KHR subtotal of one line, rounded on its own USD subtotal."""
    return to_khr(line_subtotal_usd(item))


def unit_price_khr(product: Product) -> Money:
    return to_khr(product.price)


def summarize(snapshot: Iterable[CartLineItem]) -> CartTotals:
    items = list(snapshot)
    return CartTotals(
        total_items=total_items(items),
        total_usd=total_usd(items),
        total_khr=total_khr(items),
    )
