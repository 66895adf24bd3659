"""CLI adapter printing the dashboard overview and upcoming due dates.

This module wires the dashboard use cases to the configured record store
and prints a plain-text summary of the current month.
"""

from src.application.use_cases.get_dashboard_overview import (
    GetDashboardOverviewUseCase,
)
from src.application.use_cases.get_due_dates_calendar import (
    GetDueDatesCalendarUseCase,
)
from src.infrastructure.container import build_record_store
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Print monthly totals, alerts and the due-date calendar."""
    logger = get_app_logger()
    store = build_record_store()
    data = store.get_financial_data()

    overview = GetDashboardOverviewUseCase(store, logger=logger).execute(
        data=data
    )
    entries = GetDueDatesCalendarUseCase(store, logger=logger).execute(
        data=data
    )

    summary = overview.summary
    print(f"Receitas do mês: {summary.monthly_income:.2f}")
    print(f"Despesas do mês: {summary.monthly_expenses:.2f}")
    print(f"Saldo: {summary.net_balance:.2f}")
    print(f"Pendências: {summary.pending_total:.2f}")
    print(f"Investimentos: {summary.total_investments:.2f}")
    for alert in overview.budget_alerts:
        print(f"[{alert.severity}] {alert.message}")
    print("Vencimentos:")
    for entry in entries:
        print(
            f"  dia {entry.day_of_month:02d} {entry.label:<16} "
            f"{entry.name} {entry.amount:.2f}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
