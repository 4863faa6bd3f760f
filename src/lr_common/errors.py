"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Transport
  2xxx: Ledger data
  9xxx: System

A local mutation whose target id is not held is not an error and has no
class here; views report it through their return value.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Transport ---

class TransportError(AppError):
    """Network or server failure. The message is shown to the operator verbatim."""

    def __init__(self, message: str, http_status: int = 502, code: int = 1001) -> None:
        super().__init__(code, message, http_status)


class EnvelopeDecodeError(TransportError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Malformed response: {detail}", 502, code=1002)


# --- 2xxx: Ledger data ---

class EmployeeIdRequiredError(AppError):
    def __init__(self) -> None:
        super().__init__(2001, "Employee id cannot be empty", 422)


class TransactionNotFoundError(AppError):
    def __init__(self, transaction_id: str) -> None:
        super().__init__(2002, f"Invalid transaction to be approved: {transaction_id}", 404)


# --- 9xxx: System ---

class InvalidRequestError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(9001, f"Invalid request: {detail}", 422)


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
