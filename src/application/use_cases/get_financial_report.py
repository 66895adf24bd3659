"""Use case to build the financial report and its export."""

from datetime import date, datetime

from src.application.ports.record_store import RecordStorePort
from src.domain.models import FinancialData, ReportSummary
from src.domain.services.reports import compute_report_summary, export_report
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialReportUseCase:
    """Compute report totals, rankings and the 12-month trend."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        data: FinancialData | None = None,
        today: date | None = None,
    ) -> ReportSummary:
        """Return the report for the snapshot.

        Args:
            data: Snapshot already loaded by the caller; fetched when None.
            today: Reference date; its month closes the trend.

        Returns:
            ReportSummary: Report figures.
        """
        snapshot = data or self._record_store.get_financial_data()
        report = compute_report_summary(snapshot, today=today or date.today())
        self._logger.info(
            f"Report computed: income={report.total_income}, "
            f"expenses={report.total_expenses}, net={report.net_balance}"
        )
        return report

    def export(
        self,
        data: FinancialData | None = None,
        now: datetime | None = None,
    ) -> dict:
        """Return the JSON-ready export of the report."""
        generated_at = now or datetime.now()
        report = self.execute(data=data, today=generated_at.date())
        return export_report(report, generated_at)


__all__ = ["GetFinancialReportUseCase"]
