"""Pydantic schemas for the ledger wire format and the presentation snapshot.

Wire payloads are camelCase (`firstName`, `nextPage`, `employeeId`, ...).
Each payload converts to the matching domain dataclass with `to_domain()`.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from src.lr_common.errors import EnvelopeDecodeError
from src.lr_common.money import amount_to_display, to_amount
from src.lr_ledger.domain.models import Employee, PaginatedResponse, Transaction

# ---------------------------------------------------------------------------
# Wire payloads
# ---------------------------------------------------------------------------


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class EmployeePayload(_CamelModel):
    id: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")

    def to_domain(self) -> Employee:
        return Employee(id=self.id, first_name=self.first_name, last_name=self.last_name)

    @classmethod
    def from_domain(cls, employee: Employee) -> "EmployeePayload":
        return cls(id=employee.id, first_name=employee.first_name, last_name=employee.last_name)


class TransactionPayload(_CamelModel):
    id: str
    employee: EmployeePayload
    merchant: str
    amount: Decimal
    date: str
    approved: bool = False

    def to_domain(self) -> Transaction:
        return Transaction(
            id=self.id,
            employee=self.employee.to_domain(),
            merchant=self.merchant,
            amount=to_amount(self.amount),
            date=self.date,
            approved=self.approved,
        )

    @classmethod
    def from_domain(cls, txn: Transaction) -> "TransactionPayload":
        return cls(
            id=txn.id,
            employee=EmployeePayload.from_domain(txn.employee),
            merchant=txn.merchant,
            amount=txn.amount,
            date=txn.date,
            approved=txn.approved,
        )


class PaginatedTransactionsPayload(_CamelModel):
    data: list[TransactionPayload]
    next_page: int | None = Field(alias="nextPage")

    def to_domain(self) -> PaginatedResponse[Transaction]:
        return PaginatedResponse(
            data=[t.to_domain() for t in self.data],
            next_page=self.next_page,
        )


# Request bodies (server side validates these; client side builds plain dicts)

class PaginatedTransactionsParams(_CamelModel):
    page: int | None = Field(default=None, ge=0)


class TransactionsByEmployeeParams(_CamelModel):
    employee_id: str = Field(alias="employeeId")


class SetTransactionApprovalParams(_CamelModel):
    transaction_id: str = Field(alias="transactionId")
    value: bool


# ---------------------------------------------------------------------------
# Parsing transport results into domain objects
# ---------------------------------------------------------------------------

_employees_adapter = TypeAdapter(list[EmployeePayload])
_transactions_adapter = TypeAdapter(list[TransactionPayload])


def parse_employees(raw: Any) -> list[Employee]:
    try:
        return [e.to_domain() for e in _employees_adapter.validate_python(raw)]
    except ValidationError as exc:
        raise EnvelopeDecodeError(f"employees: {exc.error_count()} invalid field(s)") from exc


def parse_transactions(raw: Any) -> list[Transaction]:
    try:
        return [t.to_domain() for t in _transactions_adapter.validate_python(raw)]
    except ValidationError as exc:
        raise EnvelopeDecodeError(f"transactions: {exc.error_count()} invalid field(s)") from exc


def parse_paginated_transactions(raw: Any) -> PaginatedResponse[Transaction]:
    try:
        return PaginatedTransactionsPayload.model_validate(raw).to_domain()
    except ValidationError as exc:
        raise EnvelopeDecodeError(
            f"paginated transactions: {exc.error_count()} invalid field(s)"
        ) from exc


# ---------------------------------------------------------------------------
# Presentation snapshot
# ---------------------------------------------------------------------------


class TransactionRow(BaseModel):
    id: str
    merchant: str
    amount_display: str
    employee_name: str
    date: str
    approved: bool

    @classmethod
    def from_domain(cls, txn: Transaction) -> "TransactionRow":
        return cls(
            id=txn.id,
            merchant=txn.merchant,
            amount_display=amount_to_display(txn.amount),
            employee_name=txn.employee.full_name,
            date=txn.date,
            approved=txn.approved,
        )


class EmployeeOption(BaseModel):
    value: str
    label: str


class LedgerScreen(BaseModel):
    status: str
    employee_options: list[EmployeeOption]
    selected_employee_id: str
    transactions: list[TransactionRow] | None
    is_employee_filter_loading: bool
    is_transactions_loading: bool
    is_paginated_loading: bool
    loading: bool
    error: str | None
    show_view_more: bool
    view_more_label: str | None
