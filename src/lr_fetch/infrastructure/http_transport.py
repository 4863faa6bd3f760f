"""HttpTransport — TransportProtocol over httpx.

Every endpoint is a POST to `{base_url}/{endpoint}` with the params as the
JSON body. The ApiResponse envelope is unwrapped and only `data` is returned.
Any network failure, HTTP error status or malformed body surfaces as
TransportError.
"""

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx

from config.settings import settings
from src.lr_common.errors import EnvelopeDecodeError, TransportError
from src.lr_common.response import unwrap_envelope

logger = logging.getLogger(__name__)


class HttpTransport:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout if timeout is not None else settings.HTTP_TIMEOUT_SECONDS,
        )

    async def __call__(self, endpoint: str, params: Mapping[str, Any]) -> Any:
        try:
            response = await self._client.post(f"/{endpoint}", json=dict(params))
        except httpx.HTTPError as exc:
            logger.warning("Transport failure on %s: %r", endpoint, exc)
            raise TransportError(str(exc) or type(exc).__name__) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            if response.is_error:
                raise TransportError(
                    f"HTTP {response.status_code} from {endpoint}",
                    http_status=response.status_code,
                ) from exc
            raise EnvelopeDecodeError(f"{endpoint} did not return JSON") from exc

        if response.is_error and not (isinstance(payload, dict) and payload.get("code")):
            raise TransportError(
                f"HTTP {response.status_code} from {endpoint}",
                http_status=response.status_code,
            )
        return unwrap_envelope(payload)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
