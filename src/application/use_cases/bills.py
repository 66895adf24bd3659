"""Use cases for bills."""

from dataclasses import dataclass
from datetime import date

from src.application.errors import RecordNotFoundError
from src.application.ports.record_store import RecordStorePort
from src.domain.models import Bill, FinancialData
from src.domain.services.filters import (
    bills_by_status,
    overdue_bills,
    upcoming_bills,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


@dataclass(frozen=True)
class BillsOverview:
    """Bills split by status and urgency."""

    pending: list[Bill]
    paid: list[Bill]
    upcoming: list[Bill]
    overdue: list[Bill]


class GetBillsOverviewUseCase:
    """Split bills into pending, paid, upcoming and overdue lists."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        data: FinancialData | None = None,
        today: date | None = None,
        days_ahead: int = 30,
    ) -> BillsOverview:
        snapshot = data or self._record_store.get_financial_data()
        reference = today or date.today()
        overview = BillsOverview(
            pending=bills_by_status(snapshot.bills, "pending"),
            paid=bills_by_status(snapshot.bills, "paid"),
            upcoming=upcoming_bills(
                snapshot.bills, today=reference, days_ahead=days_ahead
            ),
            overdue=overdue_bills(snapshot.bills, today=reference),
        )
        self._logger.info(
            f"Bills overview: pending={len(overview.pending)}, "
            f"overdue={len(overview.overdue)}"
        )
        return overview


class MarkBillPaidUseCase:
    """Move a bill from pending to paid.

    Bills have no way back to pending; paying an already paid bill leaves
    it untouched.
    """

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_usage_logger()

    def execute(self, bill_id: str) -> Bill:
        """Mark the bill as paid.

        Raises:
            RecordNotFoundError: If the bill does not exist.
        """
        bill = next(
            (item for item in self._record_store.list_bills() if item.id == bill_id),
            None,
        )
        if bill is None:
            raise RecordNotFoundError("bills", bill_id)
        if bill.status == "paid":
            self._logger.info(f"Bill {bill.name} is already paid")
            return bill
        updated = self._record_store.update_bill(bill_id, {"status": "paid"})
        self._logger.info(f"Bill {bill.name} marked as paid")
        return updated


__all__ = ["BillsOverview", "GetBillsOverviewUseCase", "MarkBillPaidUseCase"]
