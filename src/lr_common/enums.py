"""Global enums — endpoint names double as transport targets and cache-eviction keys."""

from enum import Enum


class Endpoint(str, Enum):
    EMPLOYEES = "employees"
    PAGINATED_TRANSACTIONS = "paginatedTransactions"
    TRANSACTIONS_BY_EMPLOYEE = "transactionsByEmployee"
    SET_TRANSACTION_APPROVAL = "setTransactionApproval"


class ViewStatus(str, Enum):
    """Lifecycle of the ledger screen, driven by ViewCoordinator."""
    IDLE = "IDLE"
    LOADING_ALL = "LOADING_ALL"
    VIEWING_ALL = "VIEWING_ALL"
    LOADING_FILTERED = "LOADING_FILTERED"
    VIEWING_FILTERED = "VIEWING_FILTERED"
    ERROR = "ERROR"
