"""EmployeeLedgerView — every transaction of one employee, in a single response.

fetch_by_id() replaces the held list. Only the most recent request may
write it: each call takes a fresh epoch, and so does invalidate_data(), so an
answer for a previously selected employee cannot overwrite the current one.
"""

from src.lr_common.enums import Endpoint
from src.lr_fetch.application.fetch_controller import FetchController
from src.lr_ledger.application.schemas import parse_transactions
from src.lr_ledger.domain.models import Transaction, merge_transaction


class EmployeeLedgerView:
    def __init__(self, fetcher: FetchController) -> None:
        self._fetcher = fetcher
        self._data: list[Transaction] | None = None
        self._epoch = 0

    @property
    def data(self) -> list[Transaction] | None:
        return self._data

    @property
    def loading(self) -> bool:
        return self._fetcher.loading

    async def fetch_by_id(self, employee_id: str) -> None:
        self._epoch += 1
        epoch = self._epoch
        raw = await self._fetcher.fetch_with_cache(
            Endpoint.TRANSACTIONS_BY_EMPLOYEE, {"employeeId": employee_id}
        )
        transactions = parse_transactions(raw or [])
        if epoch == self._epoch:
            self._data = transactions

    def update_transaction(self, transaction_id: str, **attributes: object) -> bool:
        """Merge `attributes` into the held record locally, without a round trip.

        An id that is not held is ignored and reported by returning False.
        """
        if self._data is None:
            return False
        return merge_transaction(self._data, transaction_id, **attributes)

    def invalidate_data(self) -> None:
        self._epoch += 1
        self._fetcher.clear_cache_by_endpoint([Endpoint.TRANSACTIONS_BY_EMPLOYEE])
        self._data = None
