"""Abstract repository for the persisted cart.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (local storage, in-memory)
live in the infrastructure layer and the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from storefront.domain.model.cart import CartLineItem


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> list[CartLineItem]:
        """Return the persisted line items in display order.

        Missing or unreadable data yields an empty list, never an error.
        """

    @abstractmethod
    def save(self, items: Sequence[CartLineItem]) -> None:
        """Persist the full cart, replacing whatever was stored.

        Raises PersistenceError if the write fails.
        """
