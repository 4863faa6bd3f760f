"""Transport Protocol — the single I/O primitive consumed by FetchController.

Unit tests inject an AsyncMock that conforms to this Protocol.
Infrastructure layer provides HttpTransport.
"""

from collections.abc import Mapping
from typing import Any, Protocol


class TransportProtocol(Protocol):
    async def __call__(self, endpoint: str, params: Mapping[str, Any]) -> Any:
        """Return the JSON-decoded result, or raise TransportError."""
        ...
