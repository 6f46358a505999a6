"""Application services: catalog loading and browsing.

Raw catalog records are untyped JSON.  ``map_raw_product`` is the single
place where they become Products: fields are checked, the category is
translated through a closed table and a missing thumbnail gets the
placeholder image.
"""

from __future__ import annotations

import logging
from typing import Any

from storefront.domain.exceptions import CatalogError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.catalog_source import CatalogSource

logger = logging.getLogger(__name__)

MAKE_UP = "Make Up"
FOOD = "Food"
FURNITURE = "Furniture"

CATEGORIES: tuple[str, ...] = (MAKE_UP, FOOD, FURNITURE)
DEFAULT_CATEGORY = MAKE_UP

CATEGORY_MAP: dict[str, str] = {
    "skincare": MAKE_UP,
    "fragrances": MAKE_UP,
    "groceries": FOOD,
    "furniture": FURNITURE,
}

PLACEHOLDER_THUMBNAIL = "https://via.placeholder.com/300x300?text=No+Image"


def map_category(api_category: Any) -> str:
    """Translate a catalog category into a storefront label.

    Unknown or missing categories fall back to DEFAULT_CATEGORY.
    """
    if isinstance(api_category, str):
        return CATEGORY_MAP.get(api_category.strip().lower(), DEFAULT_CATEGORY)
    return DEFAULT_CATEGORY


def map_raw_product(raw: Any) -> Product:
    """Convert one raw catalog record into a Product.

    Raises ValidationError when a required field is missing or has the
    wrong type.
    """
    if not isinstance(raw, dict):
        raise ValidationError(f"Product record must be an object, got {type(raw).__name__}")

    product_id = raw.get("id")
    if not isinstance(product_id, int) or isinstance(product_id, bool):
        raise ValidationError(f"Product id must be an integer, got {product_id!r}")

    title = raw.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValidationError(f"Product #{product_id} has no title")

    description = raw.get("description") or ""
    if not isinstance(description, str):
        raise ValidationError(f"Product #{product_id} description must be text")

    price = raw.get("price")
    if not isinstance(price, (int, float, str)) or isinstance(price, bool):
        raise ValidationError(f"Product #{product_id} has an invalid price: {price!r}")

    thumbnail = raw.get("thumbnail")
    if not isinstance(thumbnail, str) or not thumbnail.strip():
        thumbnail = PLACEHOLDER_THUMBNAIL

    return Product(
        id=product_id,
        title=title.strip(),
        description=description,
        price=Money.of(price),
        category=map_category(raw.get("category")),
        thumbnail=thumbnail,
    )


class LoadCatalogHandler:
    """Fetch the catalog and keep the last good product list.

    A failed fetch is logged and leaves the current list untouched.
    """

    def __init__(self, catalog_source: CatalogSource) -> None:
        self._catalog_source = catalog_source
        self._products: list[Product] = []

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    async def handle(self) -> list[Product]:
        try:
            records = await self._catalog_source.fetch_products()
        except CatalogError as exc:
            logger.error("Error fetching products: %s", exc)
            return self.products

        products: list[Product] = []
        for raw in records:
            try:
                products.append(map_raw_product(raw))
            except ValidationError as exc:
                logger.warning("Skipping catalog record: %s", exc)

        self._products = products
        logger.info("Loaded %d product(s) from catalog", len(products))
        return self.products

    def get_by_id(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None


class FilterProductsHandler:
    """Filter a product list by category label and title search term."""

    def handle(
        self,
        products: list[Product],
        category: str | None = None,
        search_term: str = "",
    ) -> list[Product]:
        if category is not None and category not in CATEGORIES:
            raise ValidationError(
                f"Unknown category '{category}'. Expected one of: {', '.join(CATEGORIES)}"
            )
        term = search_term.strip().lower()
        return [
            p
            for p in products
            if (category is None or p.category == category)
            and (not term or term in p.title.lower())
        ]
