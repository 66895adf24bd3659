"""Use case listing transactions with their monthly totals."""

from dataclasses import dataclass
from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.domain.models import FinancialData, MonthlySummary, Transaction
from src.domain.services.aggregation import compute_monthly_summary
from src.domain.services.filters import filter_transactions
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class TransactionsView:
    """Filtered transactions and the unfiltered monthly totals."""

    transactions: list[Transaction]
    summary: MonthlySummary


class GetTransactionsUseCase:
    """Filter transactions by type and origin."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        type_filter: str = "all",
        origin_filter: str = "all",
        data: FinancialData | None = None,
        today: date | None = None,
    ) -> TransactionsView:
        """Return the filtered list and the monthly totals.

        Args:
            type_filter: ``all``, ``income`` or ``expense``.
            origin_filter: ``all``, ``partner1``, ``partner2`` or ``joint``.
            data: Snapshot already loaded by the caller; fetched when None.
            today: Reference date selecting the current month.

        Returns:
            TransactionsView: Filtered transactions and totals.
        """
        snapshot = data or self._record_store.get_financial_data()
        transactions = filter_transactions(
            snapshot.transactions, type_filter, origin_filter
        )
        self._logger.info(
            f"Listed {len(transactions)} transactions "
            f"(type={type_filter}, origin={origin_filter})"
        )
        return TransactionsView(
            transactions=transactions,
            summary=compute_monthly_summary(
                snapshot, today=today or date.today()
            ),
        )


__all__ = ["GetTransactionsUseCase", "TransactionsView"]
