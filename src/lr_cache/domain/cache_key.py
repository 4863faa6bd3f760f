"""Request fingerprinting for RequestCache.

Two requests share a key iff their endpoints match and their params are
structurally equal. Params are canonicalised as JSON with sorted keys, so
dict ordering is irrelevant at every nesting level while lists keep their order.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from src.lr_common.enums import Endpoint


@dataclass(frozen=True)
class CacheKey:
    endpoint: str
    fingerprint: str

    def __str__(self) -> str:
        return f"{self.endpoint}@{self.fingerprint}"


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    raise TypeError(f"Unsupported cache param type: {type(value).__name__}")


def endpoint_name(endpoint: Endpoint | str) -> str:
    return endpoint.value if isinstance(endpoint, Endpoint) else endpoint


def make_cache_key(endpoint: Endpoint | str, params: Mapping[str, Any] | None = None) -> CacheKey:
    fingerprint = json.dumps(
        dict(params or {}),
        sort_keys=True,
        separators=(",", ":"),
        default=_json_default,
    )
    return CacheKey(endpoint=endpoint_name(endpoint), fingerprint=fingerprint)
