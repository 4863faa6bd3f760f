"""Demo ledger data served by the reference API."""

from decimal import Decimal

from src.lr_ledger.domain.models import Employee, Transaction

EMPLOYEES: list[Employee] = [
    Employee(id="emp-1", first_name="James", last_name="Smith"),
    Employee(id="emp-2", first_name="Mary", last_name="Johnson"),
    Employee(id="emp-3", first_name="Robert", last_name="Williams"),
    Employee(id="emp-4", first_name="Patricia", last_name="Brown"),
]

_BY_ID = {e.id: e for e in EMPLOYEES}

# (id, employee_id, merchant, amount, date, approved)
_ROWS: list[tuple[str, str, str, str, str, bool]] = [
    ("txn-01", "emp-1", "Uber", "23.18", "2024-01-03", False),
    ("txn-02", "emp-2", "Delta Airlines", "412.60", "2024-01-04", True),
    ("txn-03", "emp-3", "Staples", "89.99", "2024-01-05", False),
    ("txn-04", "emp-1", "Blue Bottle Coffee", "6.25", "2024-01-08", False),
    ("txn-05", "emp-4", "AWS", "1250.00", "2024-01-09", True),
    ("txn-06", "emp-2", "Hilton", "318.42", "2024-01-11", False),
    ("txn-07", "emp-3", "Lyft", "17.80", "2024-01-12", False),
    ("txn-08", "emp-4", "Figma", "45.00", "2024-01-15", True),
    ("txn-09", "emp-1", "Chipotle", "14.35", "2024-01-16", False),
    ("txn-10", "emp-2", "WeWork", "600.00", "2024-01-18", False),
    ("txn-11", "emp-3", "Home Depot", "134.07", "2024-01-19", False),
    ("txn-12", "emp-4", "Slack", "87.50", "2024-01-22", True),
    ("txn-13", "emp-1", "Amtrak", "96.00", "2024-01-24", False),
    ("txn-14", "emp-2", "Best Buy", "1049.99", "2024-01-26", False),
]


def seed_transactions() -> list[Transaction]:
    """Fresh, independent copies of the demo transactions."""
    return [
        Transaction(
            id=txn_id,
            employee=_BY_ID[employee_id],
            merchant=merchant,
            amount=Decimal(amount),
            date=date,
            approved=approved,
        )
        for txn_id, employee_id, merchant, amount, date, approved in _ROWS
    ]
