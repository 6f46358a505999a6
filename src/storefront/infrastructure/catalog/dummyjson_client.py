"""HTTP catalog source for the dummyjson.com products API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from storefront.domain.exceptions import CatalogError
from storefront.domain.repository.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


class DummyJsonCatalogClient(CatalogSource):
    """Client for the ``/products`` endpoint of a dummyjson-style API."""

    BASE_URL = "https://dummyjson.com"

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the catalog client.

        Args:
            base_url: Root URL of the catalog API
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to stub the network)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def fetch_products(self) -> list[dict[str, Any]]:
        """
        Fetch every product record.

        Returns:
            The raw ``products`` array of the response

        Raises:
            CatalogError: If the request fails or the payload is malformed
        """
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
            headers={"Accept": "application/json"},
        ) as client:
            try:
                response = await client.get("/products")
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPError as e:
                raise CatalogError(f"Catalog request failed: {e}") from e
            except ValueError as e:
                raise CatalogError(f"Catalog returned invalid JSON: {e}") from e

        products = data.get("products") if isinstance(data, dict) else None
        if not isinstance(products, list):
            raise CatalogError("Catalog response has no 'products' array")

        logger.debug("Fetched %d raw product record(s)", len(products))
        return products
