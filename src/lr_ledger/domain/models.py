"""Domain models for lr_ledger — pure dataclasses, no pydantic dependency."""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Employee:
    id: str
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


# "No filter" choice; id is reserved and never returned by the server
EMPTY_EMPLOYEE = Employee(id="", first_name="All", last_name="Employees")


@dataclass
class Transaction:
    id: str
    employee: Employee       # embedded for display without a join
    merchant: str
    amount: Decimal          # dollars, 2dp
    date: str                # ISO date
    approved: bool = False


@dataclass
class PaginatedResponse(Generic[T]):
    data: list[T] = field(default_factory=list)
    next_page: int | None = None   # opaque cursor; None = exhausted


def merge_transaction(transactions: list[Transaction], transaction_id: str, **attributes: object) -> bool:
    """Replace the transaction with `transaction_id` by a copy carrying `attributes`.

    The list is updated in place; every other record keeps its identity.
    Returns False, leaving the list untouched, when the id is not present.
    """
    for index, txn in enumerate(transactions):
        if txn.id == transaction_id:
            transactions[index] = replace(txn, **attributes)
            return True
    return False
