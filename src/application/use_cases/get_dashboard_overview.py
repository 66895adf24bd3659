"""Use case to compute the dashboard overview."""

from dataclasses import dataclass
from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.domain.models import (
    BudgetAlert,
    CategoryAmount,
    CreditPortfolioSummary,
    FinancialData,
    MonthlySummary,
    Transaction,
    TrendPoint,
)
from src.domain.services.aggregation import (
    build_budget_alerts,
    compute_category_totals,
    compute_credit_portfolio,
    compute_monthly_summary,
    rank_categories,
)
from src.domain.services.trends import build_weekly_trend
from src.infrastructure.logging.logger import get_app_logger

RECENT_TRANSACTIONS = 5


@dataclass(frozen=True)
class DashboardOverview:
    """Derived figures rendered on the dashboard."""

    summary: MonthlySummary
    credit_portfolio: CreditPortfolioSummary
    budget_alerts: list[BudgetAlert]
    spending_by_category: list[CategoryAmount]
    weekly_trend: list[TrendPoint]
    recent_transactions: list[Transaction]


class GetDashboardOverviewUseCase:
    """Compute the dashboard overview from a financial snapshot."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing the financial snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        data: FinancialData | None = None,
        today: date | None = None,
    ) -> DashboardOverview:
        """Return the dashboard overview.

        Args:
            data: Snapshot already loaded by the caller; fetched when None.
            today: Reference date selecting the current month.

        Returns:
            DashboardOverview: Monthly totals, card usage, alerts and trend.
        """
        snapshot = data or self._record_store.get_financial_data()
        reference = today or date.today()

        summary = compute_monthly_summary(snapshot, today=reference)
        overview = DashboardOverview(
            summary=summary,
            credit_portfolio=compute_credit_portfolio(
                snapshot.credit_cards, self._logger
            ),
            budget_alerts=build_budget_alerts(snapshot.credit_cards),
            spending_by_category=rank_categories(
                compute_category_totals(snapshot.transactions, "expense")
            ),
            weekly_trend=build_weekly_trend(
                snapshot.transactions, today=reference
            ),
            recent_transactions=list(
                snapshot.transactions[-RECENT_TRANSACTIONS:]
            ),
        )
        self._logger.info(
            f"Dashboard computed: income={summary.monthly_income}, "
            f"expenses={summary.monthly_expenses}, "
            f"pending={summary.pending_total}, "
            f"alerts={len(overview.budget_alerts)}"
        )
        return overview


__all__ = ["GetDashboardOverviewUseCase", "DashboardOverview"]
