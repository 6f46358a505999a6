"""Cart change broadcasting.

A registry of callbacks invoked synchronously after each committed cart
mutation.  New subscribers receive the latest snapshot immediately
(replay-of-latest), then every later snapshot in commit order.

A failing subscriber is logged and skipped; it never prevents delivery
to the others and never reaches the caller that mutated the cart.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable

from storefront.domain.model.cart import CartSnapshot

logger = logging.getLogger(__name__)

CartListener = Callable[[CartSnapshot], None]


class Subscription:
    """Handle returned by ``subscribe``; detach with ``unsubscribe()``."""

    def __init__(self, broadcaster: CartBroadcaster, listener: CartListener) -> None:
        self._broadcaster = broadcaster
        self._listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self._broadcaster._detach(self._listener)
            self.active = False


class CartBroadcaster:

    def __init__(self, initial: CartSnapshot | None = None) -> None:
        self._listeners: list[CartListener] = []
        self._latest = initial if initial is not None else CartSnapshot()
        self._pending: deque[CartSnapshot] = deque()
        self._publishing = False

    @property
    def latest(self) -> CartSnapshot:
        return self._latest

    def subscribe(self, listener: CartListener) -> Subscription:
        self._listeners.append(listener)
        self._deliver(listener, self._latest)
        return Subscription(self, listener)

    def publish(self, snapshot: CartSnapshot) -> None:
        """Deliver *snapshot* to every listener.

        A publish made by a listener while it is being notified is queued
        and delivered once the current snapshot has reached everyone.
        """
        self._pending.append(snapshot)
        if self._publishing:
            return

        self._publishing = True
        try:
            while self._pending:
                current = self._pending.popleft()
                self._latest = current
                # Iterate over a copy so listeners may unsubscribe while notified.
                for listener in list(self._listeners):
                    self._deliver(listener, current)
        finally:
            self._publishing = False

    def close(self) -> None:
        self._listeners.clear()
        self._pending.clear()

    # --- Internal helpers -----------------------------------------------------

    def _detach(self, listener: CartListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            logger.debug("Listener %r already detached", listener)

    @staticmethod
    def _deliver(listener: CartListener, snapshot: CartSnapshot) -> None:
        try:
            listener(snapshot)
        except Exception:
            logger.exception("Cart subscriber %r failed", listener)
