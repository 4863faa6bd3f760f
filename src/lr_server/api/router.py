"""Reference ledger endpoints. Each endpoint name is also the URL path.

POST /employees               — all employees
POST /paginatedTransactions   — {page?} → {data, nextPage}
POST /transactionsByEmployee  — {employeeId} → [transaction]
POST /setTransactionApproval  — {transactionId, value} → null
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request

from src.lr_common.enums import Endpoint
from src.lr_common.response import ApiResponse, success_response
from src.lr_ledger.application.schemas import (
    EmployeePayload,
    PaginatedTransactionsParams,
    PaginatedTransactionsPayload,
    SetTransactionApprovalParams,
    TransactionPayload,
    TransactionsByEmployeeParams,
)
from src.lr_server.infrastructure.store import LedgerStore, get_ledger_store

router = APIRouter(tags=["ledger"])

Store = Annotated[LedgerStore, Depends(get_ledger_store)]


def _respond(request: Request, data: Any) -> ApiResponse:
    resp = success_response(data)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post(f"/{Endpoint.EMPLOYEES.value}")
async def employees(request: Request, store: Store) -> ApiResponse:
    data = [
        EmployeePayload.from_domain(e).model_dump(mode="json", by_alias=True)
        for e in store.list_employees()
    ]
    return _respond(request, data)


@router.post(f"/{Endpoint.PAGINATED_TRANSACTIONS.value}")
async def paginated_transactions(
    request: Request,
    store: Store,
    params: Annotated[PaginatedTransactionsParams | None, Body()] = None,
) -> ApiResponse:
    page = store.page_transactions(params.page if params else None)
    payload = PaginatedTransactionsPayload(
        data=[TransactionPayload.from_domain(t) for t in page.data],
        next_page=page.next_page,
    )
    return _respond(request, payload.model_dump(mode="json", by_alias=True))


@router.post(f"/{Endpoint.TRANSACTIONS_BY_EMPLOYEE.value}")
async def transactions_by_employee(
    request: Request, store: Store, params: TransactionsByEmployeeParams
) -> ApiResponse:
    data = [
        TransactionPayload.from_domain(t).model_dump(mode="json", by_alias=True)
        for t in store.transactions_by_employee(params.employee_id)
    ]
    return _respond(request, data)


@router.post(f"/{Endpoint.SET_TRANSACTION_APPROVAL.value}")
async def set_transaction_approval(
    request: Request, store: Store, params: SetTransactionApprovalParams
) -> ApiResponse:
    store.set_transaction_approval(params.transaction_id, params.value)
    return _respond(request, None)
