"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  The cart store is
built here once per session and handed to whoever needs it.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path

from storefront.application.cart_store import CartStore
from storefront.application.catalog import LoadCatalogHandler
from storefront.domain.exceptions import ConfigurationError
from storefront.infrastructure.catalog.dummyjson_client import DummyJsonCatalogClient
from storefront.infrastructure.persistence.local_storage import LocalStorage
from storefront.infrastructure.persistence.local_storage_cart_repository import (
    LocalStorageCartRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def _get_env(key: str, default: str) -> str:
    value = os.getenv(key)
    if value is not None and value.strip() != "":
        return value.strip()
    return default


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    catalog_url: str
    http_timeout: float
    store_name: str

    @property
    def storage_path(self) -> Path:
        return self.data_dir / "local_storage.json"


def _get_float(key: str, default: str) -> float:
    value = _get_env(key, default)
    try:
        result = float(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got {value!r}") from None
    if not math.isfinite(result) or result <= 0:
        raise ConfigurationError(f"{key} must be a positive number, got {value!r}")
    return result


def load_settings() -> Settings:
    """Read settings from the environment.

    Raises ConfigurationError if a value cannot be parsed.
    """
    return Settings(
        data_dir=Path(_get_env("STOREFRONT_DATA_DIR", str(_DEFAULT_DATA_DIR))),
        catalog_url=_get_env("STOREFRONT_CATALOG_URL", DummyJsonCatalogClient.BASE_URL),
        http_timeout=_get_float("STOREFRONT_HTTP_TIMEOUT", "30.0"),
        store_name=_get_env("STOREFRONT_STORE_NAME", "BaychaStore"),
    )


def cart_repository(settings: Settings) -> LocalStorageCartRepository:
    return LocalStorageCartRepository(LocalStorage(settings.storage_path))


def cart_store(settings: Settings) -> CartStore:
    return CartStore.create(cart_repository(settings))


def catalog(settings: Settings) -> LoadCatalogHandler:
    client = DummyJsonCatalogClient(base_url=settings.catalog_url, timeout=settings.http_timeout)
    return LoadCatalogHandler(client)
