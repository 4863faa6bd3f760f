"""EmployeeDirectory — the employee list, fetched whole and cached for the session.

Employees are treated as immutable while the session lasts, so
invalidate_data() only forgets the local copy; the cache entry stays and the
next fetch_all() is served from it.
"""

from src.lr_common.enums import Endpoint
from src.lr_fetch.application.fetch_controller import FetchController
from src.lr_ledger.application.schemas import parse_employees
from src.lr_ledger.domain.models import Employee


class EmployeeDirectory:
    def __init__(self, fetcher: FetchController) -> None:
        self._fetcher = fetcher
        self._data: list[Employee] | None = None

    @property
    def data(self) -> list[Employee] | None:
        return self._data

    @property
    def loading(self) -> bool:
        return self._fetcher.loading

    async def fetch_all(self) -> None:
        raw = await self._fetcher.fetch_with_cache(Endpoint.EMPLOYEES, {})
        self._data = parse_employees(raw or [])

    def invalidate_data(self) -> None:
        self._data = None
