# src/shelf/catalog/product_service.py

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

from ..core.clock import now_ms
from ..core.ports import Clock, HttpClient, HttpResponse, KeyValueStore
from ..errors import HttpError, StoredDataError

logger = logging.getLogger(__name__)

PRODUCTS_CACHE_KEY = "products_cache"
PRODUCTS_CACHE_TIMESTAMP_KEY = "products_cache_timestamp"
FAVORITES_KEY = "favorite_products"

DEFAULT_CACHE_TTL_MS = 60 * 1000


def _dumps(value: Any) -> str:
    # Compact form: ["1","2"], not ["1", "2"].
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


class ProductService:
    """
    Product API client with a TTL cache and a favorites list.

    Both collaborators are injected:
    - store: KeyValueStore holding the cache, its timestamp and the favorites blob
    - http: async HttpClient (httpx.AsyncClient with base_url in production)

    Cache policy:
    - only the full product list is cached; details always hit the network
    - a cache entry is fresh iff payload and timestamp are both present and
      now - timestamp < cache_ttl_ms
    - stale entries are overwritten on the next successful fetch, never deleted
    - no fallback to stale data when the API fails

    Every operation is a single read-then-write over a whole blob; concurrent
    callers on the same keys can lose updates (last write wins).
    """

    def __init__(
        self,
        store: KeyValueStore,
        http: HttpClient,
        *,
        clock: Clock = now_ms,
        cache_ttl_ms: int = DEFAULT_CACHE_TTL_MS,
        products_path: str = "/api/products",
    ) -> None:
        self._store = store
        self._http = http
        self._clock = clock
        self._cache_ttl_ms = int(cache_ttl_ms)
        self._products_path = products_path.rstrip("/")

    # ---- low-level helpers ----

    def _decode(self, key: str, raw: str) -> Any:
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoredDataError(key, raw, f"invalid JSON ({e.msg})") from e

    def _cache_age_ms(self, raw_ts: str | None) -> int | None:
        if not raw_ts:
            return None
        try:
            ts = int(raw_ts.strip())
        except ValueError:
            logger.debug("Unparseable cache timestamp %r; treating cache as stale.", raw_ts)
            return None
        return self._clock() - ts

    async def _get_json(self, url: str) -> Any:
        response: HttpResponse = await self._http.get(url)
        if not response.is_success:
            raise HttpError(response.status_code)
        return response.json()

    def _load_favorites(self) -> list[str]:
        raw = self._store.get_item(FAVORITES_KEY)
        if not raw:
            return []
        value = self._decode(FAVORITES_KEY, raw)
        if not isinstance(value, list):
            raise StoredDataError(FAVORITES_KEY, raw, f"expected an array, got {type(value).__name__}")
        if not all(isinstance(item, str) for item in value):
            raise StoredDataError(FAVORITES_KEY, raw, "expected an array of strings")
        return value

    # ---- products ----

    async def get_products(self) -> Any:
        """
        Return the product list, from cache when fresh, else from the API.

        Raises HttpError on a non-success response and StoredDataError when a
        fresh cache entry is not valid JSON. Transport errors propagate as-is.
        """
        cached = self._store.get_item(PRODUCTS_CACHE_KEY)
        age = self._cache_age_ms(self._store.get_item(PRODUCTS_CACHE_TIMESTAMP_KEY))

        if cached and age is not None and age < self._cache_ttl_ms:
            logger.debug("Products cache hit age_ms=%s", age)
            return self._decode(PRODUCTS_CACHE_KEY, cached)

        logger.debug("Products cache miss age_ms=%s", age)
        products = await self._get_json(self._products_path)

        self._store.set_item(PRODUCTS_CACHE_KEY, _dumps(products))
        self._store.set_item(PRODUCTS_CACHE_TIMESTAMP_KEY, str(self._clock()))
        logger.info("Products fetched and cached url=%s", self._products_path)
        return products

    async def get_product_details(self, product_id: str) -> Any:
        """Fetch one product. Never cached."""
        url = f"{self._products_path}/{quote(str(product_id), safe='')}"
        return await self._get_json(url)

    # ---- favorites ----

    def add_product_to_favorites(self, product_id: str) -> None:
        try:
            favorites = self._load_favorites()
        except StoredDataError as e:
            # Only unreadable JSON is reset; a readable blob of the wrong shape is kept.
            if not isinstance(e.__cause__, json.JSONDecodeError):
                raise
            logger.warning("Resetting favorites: %s", e)
            favorites = []

        if product_id in favorites:
            return
        favorites.append(product_id)
        self._store.set_item(FAVORITES_KEY, _dumps(favorites))

    def remove_product_from_favorites(self, product_id: str) -> None:
        favorites = self._load_favorites()
        if product_id not in favorites:
            return
        favorites.remove(product_id)
        self._store.set_item(FAVORITES_KEY, _dumps(favorites))

    def get_favorite_products(self) -> list[str]:
        return self._load_favorites()

    def is_favorite(self, product_id: str) -> bool:
        return product_id in self._load_favorites()
