"""Application service: Build Invoice use case.

Reads a cart snapshot and prices every line in USD and KHR.  Each line's
KHR subtotal is rounded on its own, while the KHR grand total is rounded
once from the USD grand total, so the KHR column need not add up to the
KHR total exactly.
"""

from __future__ import annotations

from datetime import datetime, timezone

from storefront.application.dto import InvoiceDTO, InvoiceLineDTO
from storefront.domain.model.cart import CartSnapshot
from storefront.domain.service import pricing


class BuildInvoiceHandler:

    def __init__(self, store_name: str) -> None:
        self._store_name = store_name

    def handle(self, snapshot: CartSnapshot, issued_at: datetime | None = None) -> InvoiceDTO:
        issued_at = issued_at or datetime.now(timezone.utc)
        totals = pricing.summarize(snapshot)

        return InvoiceDTO(
            store_name=self._store_name,
            number=int(issued_at.timestamp() * 1000),
            issued_at=issued_at.strftime("%Y-%m-%d %H:%M UTC"),
            items=[
                InvoiceLineDTO(
                    index=index,
                    title=item.title,
                    quantity=item.qty,
                    unit_price_usd=str(item.price),
                    unit_price_khr=str(pricing.unit_price_khr(item.product)),
                    subtotal_usd=str(pricing.line_subtotal_usd(item)),
                    subtotal_khr=str(pricing.line_subtotal_khr(item)),
                )
                for index, item in enumerate(snapshot, start=1)
            ],
            total_items=totals.total_items,
            total_usd=str(totals.total_usd),
            total_khr=str(totals.total_khr),
        )
