"""Helpers to build domain objects in tests."""

from __future__ import annotations

from storefront.domain.model.cart import CartLineItem, CartSnapshot
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


def make_product(
    product_id: int = 1,
    price: str = "5.00",
    title: str | None = None,
    category: str | None = "Food",
) -> Product:
    return Product(
        id=product_id,
        title=title or f"Product {product_id}",
        description=f"Description of product {product_id}",
        price=Money.of(price),
        category=category,
        thumbnail=f"https://cdn.example.com/{product_id}.png",
    )


def make_snapshot(*lines: tuple[str, int]) -> CartSnapshot:
    """Build a snapshot from (price, qty) pairs with ids 1, 2, 3..."""
    return CartSnapshot(
        tuple(
            CartLineItem(product=make_product(i, price), qty=qty)
            for i, (price, qty) in enumerate(lines, start=1)
        )
    )
