"""Domain services bucketing transactions into calendar windows."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import MONTH_ABBREVIATIONS, TREND_MONTHS, TREND_WEEKS
from src.domain.models import FinancialData, Transaction, TrendPoint
from src.domain.services.aggregation import (
    paid_bills_total,
    recurring_income_total,
)
from src.utils.date_utils import add_months, in_month
from src.utils.decimal_utils import sum_decimals


def month_window(today: date, months: int = TREND_MONTHS) -> list[date]:
    """Return the first day of each month ending at ``today``'s month.

    Args:
        today: Reference date; its month is the last bucket.
        months: Number of buckets.

    Returns:
        list[date]: Month starts, oldest first.
    """
    current = today.replace(day=1)
    return [add_months(current, offset - (months - 1)) for offset in range(months)]


def month_label(month_start: date) -> str:
    """Return a short label such as ``out/26``."""
    return f"{MONTH_ABBREVIATIONS[month_start.month - 1]}/{month_start.year % 100:02d}"


def _transactions_in_month(
    transactions: Iterable[Transaction],
    kind: str,
    month_start: date,
) -> Decimal:
    return sum_decimals(
        transaction.amount
        for transaction in transactions
        if transaction.type == kind
        and in_month(transaction.date, month_start.year, month_start.month)
    )


def build_monthly_trend(
    data: FinancialData,
    *,
    today: date,
    months: int = TREND_MONTHS,
) -> list[TrendPoint]:
    """Build the month-by-month income and expense series.

    Each bucket's expenses add paid bills due in that month. Each bucket's
    income adds the total of the currently enabled recurring incomes, the
    same amount for every month.

    Args:
        data: Financial snapshot.
        today: Reference date; its month is the newest bucket.
        months: Number of buckets.

    Returns:
        list[TrendPoint]: Buckets ordered oldest first.
    """
    recurring = recurring_income_total(data.recurring_incomes)
    points: list[TrendPoint] = []
    for month_start in month_window(today, months):
        expenses = _transactions_in_month(
            data.transactions, "expense", month_start
        ) + paid_bills_total(data.bills, month_start.year, month_start.month)
        income = (
            _transactions_in_month(data.transactions, "income", month_start)
            + recurring
        )
        points.append(
            TrendPoint(
                label=month_label(month_start),
                income=income,
                expenses=expenses,
            )
        )
    return points


def week_index(day_of_month: int) -> int:
    """Return the zero-based week bucket of a day of month."""
    return (day_of_month - 1) // 7


def build_weekly_trend(
    transactions: Iterable[Transaction],
    *,
    today: date,
) -> list[TrendPoint]:
    """Split the current month's transactions into four weekly buckets.

    Days 29 to 31 map to a fifth week and are dropped.

    Args:
        transactions: Transactions to bucket.
        today: Reference date selecting the current month.

    Returns:
        list[TrendPoint]: Four buckets labelled ``Semana 1`` to ``Semana 4``.
    """
    income = [Decimal("0")] * TREND_WEEKS
    expenses = [Decimal("0")] * TREND_WEEKS
    for transaction in transactions:
        if not in_month(transaction.date, today.year, today.month):
            continue
        week = week_index(transaction.date.day)
        if week >= TREND_WEEKS:
            continue
        if transaction.type == "income":
            income[week] += transaction.amount
        else:
            expenses[week] += transaction.amount
    return [
        TrendPoint(
            label=f"Semana {week + 1}",
            income=income[week],
            expenses=expenses[week],
        )
        for week in range(TREND_WEEKS)
    ]


__all__ = [
    "month_window",
    "month_label",
    "build_monthly_trend",
    "week_index",
    "build_weekly_trend",
]
