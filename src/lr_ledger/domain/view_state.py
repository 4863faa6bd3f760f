"""Which ledger view is authoritative — a tagged union, so 'all' and
'filtered by X' can never both be active."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AllView:
    pass


@dataclass(frozen=True)
class FilteredView:
    employee_id: str


ViewMode = AllView | FilteredView
