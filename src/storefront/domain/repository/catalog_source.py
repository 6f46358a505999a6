"""Abstract source of raw catalog records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class CatalogSource(ABC):

    @abstractmethod
    async def fetch_products(self) -> list[dict[str, Any]]:
        """Return the raw product records published by the catalog.

        Raises CatalogError if the catalog is unreachable or malformed.
        """
