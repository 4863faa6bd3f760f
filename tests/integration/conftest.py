"""Integration-test fixtures: the real HttpTransport talking to the reference
ledger API in-process through httpx.ASGITransport."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.lr_fetch.infrastructure.http_transport import HttpTransport
from src.lr_server.infrastructure.store import LedgerStore
from src.main import app


@pytest.fixture
async def http_transport(ledger_store: LedgerStore) -> AsyncGenerator[HttpTransport, None]:
    asgi = ASGITransport(app=app)
    async with AsyncClient(transport=asgi, base_url="http://test/api/v1") as ac:
        yield HttpTransport(client=ac)
