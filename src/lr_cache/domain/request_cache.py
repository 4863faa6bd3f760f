"""RequestCache — session-scoped store of last successful transport results.

Lifecycle: constructed once per session and injected into every
FetchController that should share it. Nothing expires by time; entries only
leave through evict / evict_by_endpoint / clear_all.

Values are deep-copied on the way in and on the way out, so callers never
alias a stored entry.
"""

import copy
import logging
from collections.abc import Iterable
from typing import Any

from src.lr_cache.domain.cache_key import CacheKey, endpoint_name
from src.lr_common.enums import Endpoint

logger = logging.getLogger(__name__)


class RequestCache:
    def __init__(self) -> None:
        self._entries: dict[CacheKey, Any] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: CacheKey) -> Any | None:
        if key not in self._entries:
            return None
        return copy.deepcopy(self._entries[key])

    def set(self, key: CacheKey, result: Any) -> None:
        self._entries[key] = copy.deepcopy(result)

    def evict(self, key: CacheKey) -> None:
        if key in self._entries:
            del self._entries[key]
            logger.debug("Cache evict: %s", key)

    def evict_by_endpoint(self, endpoints: Iterable[Endpoint | str]) -> int:
        """Drop every entry whose endpoint is in `endpoints`, whatever its params.

        Returns the number of entries removed.
        """
        names = {endpoint_name(e) for e in endpoints}
        doomed = [key for key in self._entries if key.endpoint in names]
        for key in doomed:
            del self._entries[key]
        logger.debug("Cache evict_by_endpoint %s: %d entries", sorted(names), len(doomed))
        return len(doomed)

    def clear_all(self) -> None:
        self._entries.clear()

    def keys_for(self, endpoint: Endpoint | str) -> list[CacheKey]:
        name = endpoint_name(endpoint)
        return [key for key in self._entries if key.endpoint == name]
