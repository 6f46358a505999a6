"""Application service: Add To Cart use case.

Resolves a product id against the catalog and adds one unit of it to
the cart.  The catalog is fetched lazily, once per handler.
"""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.catalog import LoadCatalogHandler
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product


class AddToCartHandler:

    def __init__(self, cart_store: CartStore, catalog: LoadCatalogHandler) -> None:
        self._cart_store = cart_store
        self._catalog = catalog

    async def handle(self, product_id: int) -> Product:
        product = self._catalog.get_by_id(product_id)
        if product is None:
            await self._catalog.handle()
            product = self._catalog.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        self._cart_store.add_to_cart(product)
        return product
