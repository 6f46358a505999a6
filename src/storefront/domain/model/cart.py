"""Cart model — line items and the read-only snapshot handed to consumers.

Mutation of the cart happens only inside CartStore.  Everything defined
here is immutable so a snapshot can be passed to subscribers and the
invoice renderer without any risk of them changing the store's state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class CartLineItem:
    """A product copy plus the quantity ordered.

    Invariant: ``qty`` is always >= 1.  A line whose quantity would drop
    to zero is removed from the cart instead of being kept.
    """

    product: Product
    qty: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.qty, int) or isinstance(self.qty, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.qty).__name__}"
            )
        if self.qty <= 0:
            raise ValidationError("Quantity must be positive")

    @property
    def id(self) -> int:
        return self.product.id

    @property
    def title(self) -> str:
        return self.product.title

    @property
    def price(self) -> Money:
        return self.product.price

    def with_qty(self, qty: int) -> CartLineItem:
        return replace(self, qty=qty)


@dataclass(frozen=True)
class CartSnapshot:
    """Ordered, read-only view of the cart at a point in time.

    Lines keep insertion order (first added, first shown).
    """

    items: tuple[CartLineItem, ...] = ()

    def __iter__(self) -> Iterator[CartLineItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> CartLineItem:
        return self.items[index]

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find(self, product_id: int) -> CartLineItem | None:
        for item in self.items:
            if item.id == product_id:
                return item
        return None
