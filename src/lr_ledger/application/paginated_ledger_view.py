"""PaginatedLedgerView — the unfiltered transaction feed, accumulated page by page.

Each fetch_all() requests the page after the last one received and appends
it, so repeated calls grow the list ("load more"). The first request of a
sequence carries no `page` param; later ones pass back the server's
`nextPage` cursor unchanged.

invalidate_data() evicts the endpoint from the cache and starts a new
sequence. It also bumps an epoch: a page that was in flight when the view
was invalidated is dropped on arrival instead of leaking into the new sequence.
"""

import logging

from src.lr_common.enums import Endpoint
from src.lr_fetch.application.fetch_controller import FetchController
from src.lr_ledger.application.schemas import parse_paginated_transactions
from src.lr_ledger.domain.models import Transaction, merge_transaction

logger = logging.getLogger(__name__)


class PaginatedLedgerView:
    def __init__(self, fetcher: FetchController) -> None:
        self._fetcher = fetcher
        self._data: list[Transaction] | None = None
        self._next_page: int | None = None
        self._epoch = 0

    @property
    def data(self) -> list[Transaction] | None:
        return self._data

    @property
    def next_page(self) -> int | None:
        return self._next_page

    @property
    def has_more(self) -> bool:
        return self._data is not None and self._next_page is not None

    @property
    def exhausted(self) -> bool:
        return self._data is not None and self._next_page is None

    @property
    def loading(self) -> bool:
        return self._fetcher.loading

    async def fetch_all(self) -> None:
        if self.exhausted:
            logger.debug("fetch_all on exhausted feed ignored (%d items held)", len(self._data or []))
            return

        epoch = self._epoch
        params: dict[str, int | None] = {} if self._data is None else {"page": self._next_page}
        raw = await self._fetcher.fetch_with_cache(Endpoint.PAGINATED_TRANSACTIONS, params)
        page = parse_paginated_transactions(raw)

        if epoch != self._epoch:
            logger.info("Dropping stale page %s (feed was invalidated)", params.get("page", 0))
            return

        if self._data is None:
            self._data = []
        seen = {t.id for t in self._data}
        for transaction in page.data:
            if transaction.id in seen:
                continue
            seen.add(transaction.id)
            self._data.append(transaction)
        self._next_page = page.next_page

    def update_transaction(self, transaction_id: str, **attributes: object) -> bool:
        if self._data is None:
            return False
        return merge_transaction(self._data, transaction_id, **attributes)

    def invalidate_data(self) -> None:
        self._epoch += 1
        self._fetcher.clear_cache_by_endpoint([Endpoint.PAGINATED_TRANSACTIONS])
        self._data = None
        self._next_page = None
