"""ViewCoordinator — one consistent ledger screen out of three data views.

State machine:

    IDLE ──start()──▶ LOADING_ALL ──ok──▶ VIEWING_ALL
                          │                   │ select employee X
                          │ fail              ▼
                          ▼            LOADING_FILTERED ──ok──▶ VIEWING_FILTERED(X)
                        ERROR ◀────────────── fail
                          │
                          └─ retry() re-runs the exact command that failed

Every mode switch (load all / filter by employee) takes a new generation.
A command whose generation is no longer current when its awaits return
makes no transition: a slow "load all" cannot land on top of a filter the
operator picked meanwhile. The views drop their own stale payloads via
epochs, so stale data never reaches the screen either.

All TransportErrors stop here and become ERROR; nothing propagates to the caller.
"""

import functools
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace

from config.settings import settings
from src.lr_cache.domain.request_cache import RequestCache
from src.lr_common.enums import Endpoint, ViewStatus
from src.lr_common.errors import TransportError
from src.lr_fetch.application.fetch_controller import FetchController
from src.lr_fetch.domain.transport import TransportProtocol
from src.lr_ledger.application.employee_directory import EmployeeDirectory
from src.lr_ledger.application.employee_ledger_view import EmployeeLedgerView
from src.lr_ledger.application.paginated_ledger_view import PaginatedLedgerView
from src.lr_ledger.application.schemas import EmployeeOption, LedgerScreen, TransactionRow
from src.lr_ledger.domain.models import EMPTY_EMPLOYEE, Employee, Transaction
from src.lr_ledger.domain.view_state import AllView, FilteredView, ViewMode

logger = logging.getLogger(__name__)

ResumeAction = Callable[[], Awaitable[None]]


@dataclass(frozen=True)
class CoordinatorError:
    message: str
    resume: ResumeAction
    recover_status: ViewStatus | None = None   # status restored before resume runs


class ViewCoordinator:
    def __init__(
        self,
        cache: RequestCache,
        transport: TransportProtocol,
        page_size: int | None = None,
    ) -> None:
        self.cache = cache
        # One controller per view: per-view loading flags over the shared cache
        self.directory = EmployeeDirectory(FetchController(cache, transport))
        self.paginated = PaginatedLedgerView(FetchController(cache, transport))
        self.by_employee = EmployeeLedgerView(FetchController(cache, transport))
        self._writer = FetchController(cache, transport)
        self._page_size = page_size or settings.PAGE_SIZE

        self._status = ViewStatus.IDLE
        self._mode: ViewMode = AllView()
        self._error: CoordinatorError | None = None
        self._generation = 0
        self._initial_loading = False

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def status(self) -> ViewStatus:
        return self._status

    @property
    def mode(self) -> ViewMode:
        return self._mode

    @property
    def error(self) -> str | None:
        return self._error.message if self._error else None

    @property
    def employees(self) -> list[Employee] | None:
        return self.directory.data

    @property
    def transactions(self) -> list[Transaction] | None:
        if isinstance(self._mode, FilteredView):
            return self.by_employee.data
        return self.paginated.data

    @property
    def has_more_pages(self) -> bool:
        return isinstance(self._mode, AllView) and self.paginated.has_more

    @property
    def loading(self) -> bool:
        return (
            self._initial_loading
            or self.directory.loading
            or self.paginated.loading
            or self.by_employee.loading
            or self._writer.loading
        )

    def snapshot(self) -> LedgerScreen:
        transactions = self.transactions
        employees = self.directory.data
        options = (
            []
            if employees is None
            else [
                EmployeeOption(value=e.id, label=e.full_name)
                for e in [EMPTY_EMPLOYEE, *employees]
            ]
        )
        show_view_more = transactions is not None and self.has_more_pages
        label = None
        if show_view_more and not self.paginated.loading and transactions is not None:
            # Display heuristic: assumes every remaining page is full
            shown = len(transactions)
            estimated = shown + (self.paginated.next_page or 0) * self._page_size
            label = f"({shown} of {estimated})"

        return LedgerScreen(
            status=self._status.value,
            employee_options=options,
            selected_employee_id=(
                self._mode.employee_id if isinstance(self._mode, FilteredView) else EMPTY_EMPLOYEE.id
            ),
            transactions=(
                None if transactions is None else [TransactionRow.from_domain(t) for t in transactions]
            ),
            is_employee_filter_loading=self._initial_loading or self.directory.loading,
            is_transactions_loading=(
                self.by_employee.loading or (self.paginated.loading and transactions is None)
            ),
            is_paginated_loading=self.paginated.loading,
            loading=self.loading,
            error=self.error,
            show_view_more=show_view_more,
            view_more_label=label,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Mount: load everything unless the employee directory is already there."""
        if self.directory.data is None and not self.directory.loading:
            await self.load_all_transactions()

    async def select_employee(self, employee: Employee | None) -> None:
        """Picker change. None means the selection was cleared and is ignored."""
        if employee is None:
            return
        if employee.id == EMPTY_EMPLOYEE.id:
            await self.load_all_transactions()
            return
        await self.load_transactions_by_employee(employee.id)

    async def load_all_transactions(self) -> None:
        generation = self._begin(AllView(), ViewStatus.LOADING_ALL)
        self.by_employee.invalidate_data()
        self.paginated.invalidate_data()
        self._initial_loading = True
        try:
            await self.directory.fetch_all()
            if generation != self._generation:
                logger.info("Load-all superseded before first page (generation %d)", generation)
                return
            await self.paginated.fetch_all()
        except TransportError as exc:
            self._fail(generation, exc, self.load_all_transactions)
            return
        finally:
            if generation == self._generation:
                self._initial_loading = False
        self._settle(generation, ViewStatus.VIEWING_ALL)

    async def load_transactions_by_employee(self, employee_id: str) -> None:
        if employee_id == EMPTY_EMPLOYEE.id:
            await self.load_all_transactions()
            return

        generation = self._begin(FilteredView(employee_id), ViewStatus.LOADING_FILTERED)
        self.paginated.invalidate_data()
        try:
            await self.by_employee.fetch_by_id(employee_id)
        except TransportError as exc:
            self._fail(
                generation, exc, functools.partial(self.load_transactions_by_employee, employee_id)
            )
            return
        self._settle(generation, ViewStatus.VIEWING_FILTERED)

    async def load_more_transactions(self) -> None:
        if self._status not in (ViewStatus.VIEWING_ALL, ViewStatus.VIEWING_FILTERED):
            logger.debug("load_more ignored in status %s", self._status.value)
            return

        generation = self._generation
        resume_status = self._status
        self._error = None
        try:
            if isinstance(self._mode, FilteredView):
                # Unpaginated endpoint: "more" is just the same request again
                await self.by_employee.fetch_by_id(self._mode.employee_id)
            elif self.paginated.has_more:
                await self.paginated.fetch_all()
        except TransportError as exc:
            self._fail(generation, exc, self.load_more_transactions, recover_status=resume_status)

    async def set_transaction_approval(self, transaction_id: str, value: bool) -> None:
        generation = self._generation
        resume_status: ViewStatus | None = self._status
        if self._status is ViewStatus.ERROR:
            # Latest failure wins; keep the way back out of the earlier one
            resume_status = self._error.recover_status if self._error else None
        try:
            await self._writer.fetch_without_cache(
                Endpoint.SET_TRANSACTION_APPROVAL,
                {"transactionId": transaction_id, "value": value},
            )
        except TransportError as exc:
            self._fail(
                generation,
                exc,
                functools.partial(self.set_transaction_approval, transaction_id, value),
                recover_status=resume_status,
            )
            return

        # The record may sit in either feed, whichever one is on screen
        self._writer.clear_cache_by_endpoint(
            [Endpoint.PAGINATED_TRANSACTIONS, Endpoint.TRANSACTIONS_BY_EMPLOYEE]
        )
        self.by_employee.update_transaction(transaction_id, approved=value)
        self.paginated.update_transaction(transaction_id, approved=value)
        logger.info("Transaction %s approval set to %s", transaction_id, value)

    async def retry(self) -> None:
        """Re-run the command that produced the current error."""
        if self._status is not ViewStatus.ERROR or self._error is None:
            return
        failed = self._error
        self._error = None
        if failed.recover_status is not None:
            self._status = failed.recover_status
        await failed.resume()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _begin(self, mode: ViewMode, status: ViewStatus) -> int:
        self._generation += 1
        self._mode = mode
        self._error = None
        self._initial_loading = False
        self._transition(status)
        return self._generation

    def _settle(self, generation: int, status: ViewStatus) -> None:
        if generation != self._generation:
            logger.info("Discarding result of superseded request (generation %d)", generation)
            return
        if self._error is not None:
            # A command that overlapped this load failed; ERROR stays until retry
            self._error = replace(self._error, recover_status=status)
            logger.info("Load settled under pending error; recover to %s", status.value)
            return
        self._transition(status)

    def _fail(
        self,
        generation: int,
        exc: TransportError,
        resume: ResumeAction,
        recover_status: ViewStatus | None = None,
    ) -> None:
        if generation != self._generation:
            logger.info("Ignoring failure of superseded request: %s", exc.message)
            return
        logger.warning("Ledger request failed (%s): %s", self._status.value, exc.message)
        self._error = CoordinatorError(
            message=exc.message, resume=resume, recover_status=recover_status
        )
        self._transition(ViewStatus.ERROR)

    def _transition(self, status: ViewStatus) -> None:
        if status is not self._status:
            logger.info("Ledger view %s -> %s", self._status.value, status.value)
        self._status = status
