"""Product value as published by the remote catalog.

The cart never owns products; it stores a copy of the value inside each
line item, so a Product is frozen.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import USD, Money


@dataclass(frozen=True)
class Product:
    """An immutable catalog record, priced in USD."""

    id: int
    title: str
    description: str
    price: Money
    category: str | None = None
    thumbnail: str | None = None

    def __post_init__(self) -> None:
        if self.price.currency != USD:
            raise ValidationError(
                f"Product price must be in {USD}, got {self.price.currency}"
            )
