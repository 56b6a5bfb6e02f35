from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Protocol

import httpx
from pydantic import TypeAdapter

from ..recommendations.models import Product
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig

logger = logging.getLogger(__name__)

_PRODUCT_LIST = TypeAdapter(list[Product])


class CatalogProvider(Protocol):
    def get_catalog(self) -> list[Product]: ...


def parse_catalog(payload: Any) -> list[Product]:
    """Validate a json-server payload: a bare list or ``{"products": [...]}``."""
    if isinstance(payload, dict):
        payload = payload.get("products", [])
    return _PRODUCT_LIST.validate_python(payload)


class StaticCatalogProvider:
    """In-memory catalog snapshot."""

    def __init__(self, products: Iterable[Product]) -> None:
        self._products = tuple(products)

    def get_catalog(self) -> list[Product]:
        return list(self._products)


class JsonFileCatalogProvider:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def get_catalog(self) -> list[Product]:
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            return parse_catalog(payload)
        except (OSError, ValueError):
            logger.warning("Could not load catalog from %s", self.path, exc_info=True)
            return []


class HttpCatalogProvider:
    """
    Fetch the catalog from a json-server style endpoint.

    Any failure (connection error, non-2xx status, bad JSON, invalid
    records) is logged and reported as an empty catalog.
    """

    def __init__(self, config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> None:
        self.config = config

    def get_catalog(self) -> list[Product]:
        try:
            response = httpx.get(self.config.url, timeout=self.config.timeout)
            response.raise_for_status()
            return parse_catalog(response.json())
        except (httpx.HTTPError, ValueError):
            logger.warning(
                "Could not load catalog from %s, continuing with an empty catalog",
                self.config.url,
                exc_info=True,
            )
            return []


def get_default_provider(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> CatalogProvider:
    if config.source == "file":
        return JsonFileCatalogProvider(config.path)
    return HttpCatalogProvider(config)
