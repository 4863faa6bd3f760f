"""FetchController — cache-aware front for one transport.

fetch_with_cache:    read-through (cache hit → no transport call; miss → call, store on success)
fetch_without_cache: always calls transport, never touches the cache

`loading` is true while any call made through this instance is pending.
It is a counter rather than a flag so overlapping calls share one indicator,
and it is decremented in `finally` so a failing transport cannot leave it set.
Results that are None are returned but never stored.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from src.lr_cache.domain.cache_key import endpoint_name, make_cache_key
from src.lr_cache.domain.request_cache import RequestCache
from src.lr_common.enums import Endpoint
from src.lr_fetch.domain.transport import TransportProtocol

logger = logging.getLogger(__name__)


class FetchController:
    def __init__(self, cache: RequestCache, transport: TransportProtocol) -> None:
        self._cache = cache
        self._transport = transport
        self._in_flight = 0

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    async def fetch_with_cache(
        self, endpoint: Endpoint | str, params: Mapping[str, Any] | None = None
    ) -> Any:
        key = make_cache_key(endpoint, params)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit: %s", key)
            return cached

        logger.debug("Cache miss: %s", key)
        result = await self._call(key.endpoint, params)
        if result is not None:
            self._cache.set(key, result)
        return result

    async def fetch_without_cache(
        self, endpoint: Endpoint | str, params: Mapping[str, Any] | None = None
    ) -> Any:
        return await self._call(endpoint_name(endpoint), params)

    def clear_cache(self) -> None:
        self._cache.clear_all()

    def clear_cache_by_endpoint(self, endpoints: Iterable[Endpoint | str]) -> None:
        self._cache.evict_by_endpoint(endpoints)

    async def _call(self, endpoint: str, params: Mapping[str, Any] | None) -> Any:
        self._in_flight += 1
        try:
            return await self._transport(endpoint, dict(params or {}))
        finally:
            self._in_flight -= 1
