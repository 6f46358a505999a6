"""LocalStorage-backed implementation of CartRepository.

The whole cart lives under one key as a JSON array, in display order:

    [{"id": 1, "title": "...", "description": "...", "price": 9.99,
      "category": "Food", "thumbnail": "https://...", "qty": 2}, ...]

Prices are JSON numbers, so fractional prices are limited to float
precision.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any, Sequence

from storefront.domain.exceptions import PersistenceError, ValidationError
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.local_storage import LocalStorage

logger = logging.getLogger(__name__)

CART_KEY = "cart"


class LocalStorageCartRepository(CartRepository):

    def __init__(self, storage: LocalStorage, key: str = CART_KEY) -> None:
        self._storage = storage
        self._key = key

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> list[CartLineItem]:
        try:
            stored = self._storage.get_item(self._key)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read local storage, starting with an empty cart: %s", exc)
            return []

        if not stored:
            return []

        try:
            raw = json.loads(stored, parse_float=Decimal)
            if not isinstance(raw, list):
                raise ValidationError("Stored cart is not a list")
            return [self._to_domain(record) for record in raw]
        except (ValueError, KeyError, TypeError, ValidationError) as exc:
            logger.warning("Stored cart is corrupt, starting with an empty cart: %s", exc)
            return []

    def save(self, items: Sequence[CartLineItem]) -> None:
        try:
            payload = json.dumps([self._to_raw(item) for item in items], ensure_ascii=False)
        except (TypeError, ValueError, OverflowError) as exc:
            raise PersistenceError(f"Could not serialize cart: {exc}") from exc
        try:
            self._storage.set_item(self._key, payload)
        except OSError as exc:
            raise PersistenceError(f"Could not write cart to {self._storage.file_path}: {exc}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: CartLineItem) -> dict[str, Any]:
        product = item.product
        raw: dict[str, Any] = {
            "id": product.id,
            "title": product.title,
            "description": product.description,
            "price": _to_number(product.price.amount),
        }
        if product.category is not None:
            raw["category"] = product.category
        if product.thumbnail is not None:
            raw["thumbnail"] = product.thumbnail
        raw["qty"] = item.qty
        return raw

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> CartLineItem:
        product_id = raw["id"]
        if not isinstance(product_id, int) or isinstance(product_id, bool):
            raise ValidationError(f"Stored product id must be an integer, got {product_id!r}")
        product = Product(
            id=product_id,
            title=str(raw["title"]),
            description=str(raw.get("description", "")),
            price=Money.of(raw["price"]),
            category=raw.get("category"),
            thumbnail=raw.get("thumbnail"),
        )
        return CartLineItem(product=product, qty=raw["qty"])


def _to_number(amount: Decimal) -> int | float:
    """Render a price as a JSON number.

    Fractional prices go through float, so only the first 15 significant
    digits survive a round trip.  Catalog prices carry two decimals.
    """
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)
