"""In-memory ledger backing the reference API. Not persisted; one per process."""

import logging

from config.settings import settings
from src.lr_common.errors import EmployeeIdRequiredError, TransactionNotFoundError
from src.lr_ledger.domain.models import Employee, PaginatedResponse, Transaction, merge_transaction
from src.lr_server.domain.seed import EMPLOYEES, seed_transactions

logger = logging.getLogger(__name__)


class LedgerStore:
    def __init__(
        self,
        employees: list[Employee] | None = None,
        transactions: list[Transaction] | None = None,
        page_size: int | None = None,
    ) -> None:
        self._employees = list(EMPLOYEES if employees is None else employees)
        self._transactions = seed_transactions() if transactions is None else list(transactions)
        self._page_size = page_size or settings.PAGE_SIZE

    def list_employees(self) -> list[Employee]:
        return list(self._employees)

    def page_transactions(self, page: int | None) -> PaginatedResponse[Transaction]:
        """Page `page` (0-based; None means 0). nextPage is None on the last page."""
        index = page or 0
        start = index * self._page_size
        end = start + self._page_size
        return PaginatedResponse(
            data=self._transactions[start:end],
            next_page=index + 1 if end < len(self._transactions) else None,
        )

    def transactions_by_employee(self, employee_id: str) -> list[Transaction]:
        if not employee_id:
            raise EmployeeIdRequiredError()
        return [t for t in self._transactions if t.employee.id == employee_id]

    def set_transaction_approval(self, transaction_id: str, value: bool) -> None:
        if not merge_transaction(self._transactions, transaction_id, approved=value):
            raise TransactionNotFoundError(transaction_id)
        logger.info("Approval stored: %s=%s", transaction_id, value)


_store: LedgerStore | None = None


def get_ledger_store() -> LedgerStore:
    """FastAPI dependency: the process-wide store, created on first use."""
    global _store  # noqa: PLW0603
    if _store is None:
        _store = LedgerStore()
    return _store
