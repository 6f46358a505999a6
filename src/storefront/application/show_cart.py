"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.model.cart import CartSnapshot
from storefront.domain.service import pricing


class ShowCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self) -> CartDTO:
        return self._to_dto(self._cart_store.get_cart())

    @staticmethod
    def _to_dto(snapshot: CartSnapshot) -> CartDTO:
        totals = pricing.summarize(snapshot)
        return CartDTO(
            items=[
                CartLineDTO(
                    product_id=item.id,
                    title=item.title,
                    quantity=item.qty,
                    unit_price=str(item.price),
                    line_total=str(pricing.line_subtotal_usd(item)),
                )
                for item in snapshot
            ],
            total_items=totals.total_items,
            total_usd=str(totals.total_usd),
            total_khr=str(totals.total_khr),
        )
