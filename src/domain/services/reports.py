"""Domain services assembling the financial report."""

from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import RECURRING_INCOME_CATEGORY, TREND_MONTHS
from src.domain.models import CategoryAmount, FinancialData, ReportSummary
from src.domain.services.aggregation import (
    compute_category_totals,
    compute_partner_comparison,
    paid_bills_total,
    rank_categories,
    recurring_income_total,
    sum_transactions,
)
from src.domain.services.trends import build_monthly_trend


def compute_report_summary(
    data: FinancialData,
    *,
    today: date,
) -> ReportSummary:
    """Compute the figures of the report screen.

    Unlike the dashboard, report expenses include every paid bill whatever
    its due month, and enabled recurring incomes are folded into the
    salary income category.

    Args:
        data: Financial snapshot.
        today: Reference date for the monthly trend.

    Returns:
        ReportSummary: Totals, rankings, partner rows and trend.
    """
    recurring = recurring_income_total(data.recurring_incomes)
    total_income = sum_transactions(data.transactions, "income") + recurring
    total_expenses = sum_transactions(
        data.transactions, "expense"
    ) + paid_bills_total(data.bills)

    income_totals = compute_category_totals(data.transactions, "income")
    if recurring > 0:
        income_totals[RECURRING_INCOME_CATEGORY] = (
            income_totals.get(RECURRING_INCOME_CATEGORY, Decimal("0"))
            + recurring
        )

    return ReportSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        average_monthly_expense=total_expenses / TREND_MONTHS,
        expenses_by_category=rank_categories(
            compute_category_totals(data.transactions, "expense")
        ),
        income_by_category=rank_categories(income_totals),
        partner_comparison=compute_partner_comparison(data),
        monthly_trend=build_monthly_trend(data, today=today),
    )


def _categories_payload(items: list[CategoryAmount]) -> list[dict]:
    return [{"name": item.category, "value": float(item.amount)} for item in items]


def export_report(report: ReportSummary, generated_at: datetime) -> dict:
    """Return a JSON-serializable dictionary of the report.

    Args:
        report: Report to export.
        generated_at: Timestamp stored in the export.

    Returns:
        dict: Export payload with camelCase keys.
    """
    return {
        "generatedAt": generated_at.isoformat(),
        "summary": {
            "totalIncome": float(report.total_income),
            "totalExpenses": float(report.total_expenses),
            "netBalance": float(report.net_balance),
            "avgMonthlyExpense": float(report.average_monthly_expense),
        },
        "partnerComparison": [
            {
                "name": row.label,
                "origin": row.origin,
                "income": float(row.income),
                "expenses": float(row.expenses),
            }
            for row in report.partner_comparison
        ],
        "expensesByCategory": _categories_payload(report.expenses_by_category),
        "incomeByCategory": _categories_payload(report.income_by_category),
        "monthlyTrend": [
            {
                "month": point.label,
                "income": float(point.income),
                "expenses": float(point.expenses),
            }
            for point in report.monthly_trend
        ],
    }


__all__ = ["compute_report_summary", "export_report"]
