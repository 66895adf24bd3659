"""Record selection helpers used by list screens."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from src.domain.constants import FILTER_ALL, UPCOMING_BILLS_DAYS
from src.domain.models import Bill, Investment, Transaction


def filter_transactions(
    transactions: Iterable[Transaction],
    type_filter: str = FILTER_ALL,
    origin_filter: str = FILTER_ALL,
) -> list[Transaction]:
    """Filter transactions by type and origin; ``all`` disables a filter."""
    return [
        transaction
        for transaction in transactions
        if type_filter in (FILTER_ALL, transaction.type)
        and origin_filter in (FILTER_ALL, transaction.origin)
    ]


def transactions_by_category(
    transactions: Iterable[Transaction],
    category: str,
) -> list[Transaction]:
    return [item for item in transactions if item.category == category]


def transactions_in_range(
    transactions: Iterable[Transaction],
    start: datetime,
    end: datetime,
) -> list[Transaction]:
    """Return transactions dated within ``[start, end]``."""
    return [item for item in transactions if start <= item.date <= end]


def bills_by_status(bills: Iterable[Bill], status: str) -> list[Bill]:
    return [bill for bill in bills if bill.status == status]


def bills_by_owner(bills: Iterable[Bill], owner: str) -> list[Bill]:
    return [bill for bill in bills if bill.owner == owner]


def upcoming_bills(
    bills: Iterable[Bill],
    *,
    today: date,
    days_ahead: int = UPCOMING_BILLS_DAYS,
) -> list[Bill]:
    """Return pending bills due between today and ``days_ahead`` days out.

    Args:
        bills: Bills to inspect.
        today: Reference date.
        days_ahead: Size of the look-ahead window in days.

    Returns:
        list[Bill]: Matching bills sorted by due date.
    """
    horizon = today + timedelta(days=days_ahead)
    return sorted(
        (
            bill
            for bill in bills
            if bill.status == "pending" and today <= bill.due_date <= horizon
        ),
        key=lambda bill: bill.due_date,
    )


def overdue_bills(bills: Iterable[Bill], *, today: date) -> list[Bill]:
    """Return pending bills due before today, sorted by due date."""
    return sorted(
        (
            bill
            for bill in bills
            if bill.status == "pending" and bill.due_date < today
        ),
        key=lambda bill: bill.due_date,
    )


def investments_by_owner(
    investments: Iterable[Investment],
    owner: str,
) -> list[Investment]:
    return [item for item in investments if item.owner == owner]


def investments_by_type(
    investments: Iterable[Investment],
    investment_type: str,
) -> list[Investment]:
    return [item for item in investments if item.type == investment_type]


__all__ = [
    "filter_transactions",
    "transactions_by_category",
    "transactions_in_range",
    "bills_by_status",
    "bills_by_owner",
    "upcoming_bills",
    "overdue_bills",
    "investments_by_owner",
    "investments_by_type",
]
