"""Shared test fixtures."""

from collections.abc import AsyncGenerator, Generator

import pytest
from httpx import ASGITransport, AsyncClient

from src.lr_cache.domain.request_cache import RequestCache
from src.lr_server.infrastructure.store import LedgerStore, get_ledger_store
from src.main import app


@pytest.fixture
def cache() -> RequestCache:
    return RequestCache()


@pytest.fixture
def ledger_store() -> Generator[LedgerStore, None, None]:
    """Fresh seeded store, swapped into the app for the duration of a test."""
    store = LedgerStore(page_size=5)
    app.dependency_overrides[get_ledger_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_ledger_store, None)


@pytest.fixture
async def client(ledger_store: LedgerStore) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for the reference ledger API."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
