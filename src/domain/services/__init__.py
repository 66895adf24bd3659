"""Domain services package."""

from .aggregation import (
    build_budget_alerts,
    compute_category_totals,
    compute_credit_portfolio,
    compute_credit_utilization,
    compute_monthly_summary,
    compute_partner_comparison,
    compute_pending_obligations,
    rank_categories,
)
from .due_dates import entries_for_day, merge_due_dates, resolve_label
from .installments import (
    build_installment_schedule,
    group_installments_by_month,
    total_to_spend,
)
from .investments import (
    apply_monthly_yield,
    compute_investment_portfolio,
    compute_monthly_yield,
    compute_roi_percent,
    project_yield,
)
from .reports import compute_report_summary, export_report
from .trends import build_monthly_trend, build_weekly_trend

__all__ = [
    "build_budget_alerts",
    "compute_category_totals",
    "compute_credit_portfolio",
    "compute_credit_utilization",
    "compute_monthly_summary",
    "compute_partner_comparison",
    "compute_pending_obligations",
    "rank_categories",
    "entries_for_day",
    "merge_due_dates",
    "resolve_label",
    "build_installment_schedule",
    "group_installments_by_month",
    "total_to_spend",
    "apply_monthly_yield",
    "compute_investment_portfolio",
    "compute_monthly_yield",
    "compute_roi_percent",
    "project_yield",
    "compute_report_summary",
    "export_report",
    "build_monthly_trend",
    "build_weekly_trend",
]
