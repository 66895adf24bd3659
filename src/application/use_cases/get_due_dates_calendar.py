"""Use case to build the unified due-date calendar."""

from src.application.ports.record_store import RecordStorePort
from src.domain.models import DueDateEntry, FinancialData
from src.domain.services.due_dates import entries_for_day, merge_due_dates
from src.infrastructure.logging.logger import get_app_logger


class GetDueDatesCalendarUseCase:
    """Merge explicit due dates, bills and pending invoices."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        data: FinancialData | None = None,
        day_of_month: int | None = None,
    ) -> list[DueDateEntry]:
        """Return calendar entries sorted by day of month.

        Args:
            data: Snapshot already loaded by the caller; fetched when None.
            day_of_month: Optional day restricting the entries.

        Returns:
            list[DueDateEntry]: Ordered obligations.
        """
        snapshot = data or self._record_store.get_financial_data()
        entries = merge_due_dates(
            snapshot.due_dates,
            snapshot.bills,
            snapshot.credit_cards,
        )
        if day_of_month is not None:
            entries = entries_for_day(entries, day_of_month)
        self._logger.info(f"Built due-date calendar with {len(entries)} entries")
        return entries


__all__ = ["GetDueDatesCalendarUseCase"]
