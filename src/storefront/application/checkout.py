"""Application service: Checkout use case.

Produces the invoice for the current cart and then clears it.  There is
no payment step; a completed checkout simply ends the cart's life.
"""

from __future__ import annotations

import logging
from datetime import datetime

from storefront.application.build_invoice import BuildInvoiceHandler
from storefront.application.cart_store import CartStore
from storefront.application.dto import InvoiceDTO
from storefront.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, cart_store: CartStore, invoice_handler: BuildInvoiceHandler) -> None:
        self._cart_store = cart_store
        self._invoice_handler = invoice_handler

    def handle(self, issued_at: datetime | None = None) -> InvoiceDTO:
        snapshot = self._cart_store.get_cart()
        if snapshot.is_empty:
            raise ValidationError("Your cart is empty")

        invoice = self._invoice_handler.handle(snapshot, issued_at)
        self._cart_store.clear_cart()
        logger.info("Checkout complete, invoice #%d (%s)", invoice.number, invoice.total_usd)
        return invoice
