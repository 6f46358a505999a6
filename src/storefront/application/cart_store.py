"""Application service: the cart store.

CartStore is the sole owner of the cart.  Every read goes through
``get_cart()`` (an immutable snapshot) and every write through one of the
mutating operations, each of which:

1. applies the change to the in-memory line items,
2. persists the full cart through the CartRepository,
3. publishes the new snapshot to all subscribers.

A failed write is logged and ignored; the in-memory cart stays
authoritative for the session.  All operations run behind a single lock
so mutations are never interleaved and notifications follow commit order.
"""

from __future__ import annotations

import logging
import threading

from storefront.application.broadcast import CartBroadcaster, CartListener, Subscription
from storefront.domain.exceptions import PersistenceError, ValidationError
from storefront.domain.model.cart import CartLineItem, CartSnapshot
from storefront.domain.model.product import Product
from storefront.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class CartStore:
    """Owner of the cart state for one session.

    Use ``CartStore.create()`` at session start and ``dispose()`` at
    session end.
    """

    def __init__(self, cart_repo: CartRepository, items: list[CartLineItem] | None = None) -> None:
        self._cart_repo = cart_repo
        self._items: list[CartLineItem] = list(items or [])
        self._broadcaster = CartBroadcaster(self._snapshot())
        self._lock = threading.RLock()
        self._disposed = False

    # --- Lifecycle ------------------------------------------------------------

    @classmethod
    def create(cls, cart_repo: CartRepository) -> CartStore:
        """Build a store seeded from whatever the repository holds."""
        items = _dedupe(cart_repo.load())
        logger.debug("Cart restored with %d line(s)", len(items))
        return cls(cart_repo, items)

    def dispose(self) -> None:
        """Detach every subscriber; the store rejects mutations afterwards."""
        with self._lock:
            self._broadcaster.close()
            self._disposed = True

    @property
    def disposed(self) -> bool:
        return self._disposed

    # --- Queries --------------------------------------------------------------

    def get_cart(self) -> CartSnapshot:
        with self._lock:
            return self._snapshot()

    def get_line(self, product_id: int) -> CartLineItem | None:
        with self._lock:
            return self._snapshot().find(product_id)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    # --- Mutations ------------------------------------------------------------

    def add_to_cart(self, product: Product) -> None:
        """Add one unit of *product*, appending a new line if needed."""
        with self._lock:
            self._assert_open()
            index = self._index_of(product.id)
            if index is None:
                self._items.append(CartLineItem(product=product, qty=1))
            else:
                line = self._items[index]
                self._items[index] = line.with_qty(line.qty + 1)
            logger.debug("Added product #%s to cart", product.id)
            self._commit()

    def change_qty(self, product_id: int, delta: int) -> None:
        """Shift a line's quantity by *delta*; at zero or below the line goes.

        Unknown ids are ignored.
        """
        with self._lock:
            self._assert_open()
            index = self._index_of(product_id)
            if index is None:
                return

            new_qty = self._items[index].qty + delta
            if new_qty <= 0:
                self.remove(product_id)
                return

            self._items[index] = self._items[index].with_qty(new_qty)
            logger.debug("Product #%s quantity now %d", product_id, new_qty)
            self._commit()

    def remove(self, product_id: int) -> None:
        with self._lock:
            self._assert_open()
            self._items = [item for item in self._items if item.id != product_id]
            logger.debug("Removed product #%s from cart", product_id)
            self._commit()

    def clear_cart(self) -> None:
        with self._lock:
            self._assert_open()
            self._items = []
            logger.debug("Cart cleared")
            self._commit()

    # --- Notifications --------------------------------------------------------

    def subscribe(self, listener: CartListener) -> Subscription:
        """Register *listener*; it is called with the current cart right away."""
        with self._lock:
            self._assert_open()
            return self._broadcaster.subscribe(listener)

    # --- Internal helpers -----------------------------------------------------

    def _commit(self) -> None:
        snapshot = self._snapshot()
        try:
            self._cart_repo.save(snapshot.items)
        except PersistenceError:
            logger.exception("Could not persist cart; keeping in-memory state")
        self._broadcaster.publish(snapshot)

    def _snapshot(self) -> CartSnapshot:
        return CartSnapshot(tuple(self._items))

    def _index_of(self, product_id: int) -> int | None:
        for i, item in enumerate(self._items):
            if item.id == product_id:
                return i
        return None

    def _assert_open(self) -> None:
        if self._disposed:
            raise ValidationError("Cart store has been disposed")


def _dedupe(items: list[CartLineItem]) -> list[CartLineItem]:
    """Merge repeated ids from hand-edited storage into one line each."""
    merged: list[CartLineItem] = []
    for item in items:
        for i, existing in enumerate(merged):
            if existing.id == item.id:
                merged[i] = existing.with_qty(existing.qty + item.qty)
                break
        else:
            merged.append(item)
    return merged
