"""Holder of the last successfully loaded financial snapshot."""

from typing import Callable, TypeVar

from src.application.errors import RecordStoreError
from src.application.ports.record_store import RecordStorePort
from src.domain.models import FinancialData
from src.infrastructure.logging.logger import get_app_logger

T = TypeVar("T")


class DashboardSession:
    """Keep the last-known-good snapshot of a single-user session.

    Every mutation is followed by a full refetch. A failed fetch or mutation
    leaves the previous snapshot in place and propagates the error.
    """

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._snapshot: FinancialData | None = None

    @property
    def snapshot(self) -> FinancialData | None:
        """Return the current snapshot, or None before the first load."""
        return self._snapshot

    def refresh(self) -> FinancialData:
        """Reload the full snapshot from the store.

        Raises:
            RecordStoreError: If the store cannot be read.
        """
        try:
            data = self._record_store.get_financial_data()
        except RecordStoreError as exc:
            self._logger.error(f"Failed to load financial data: {exc}")
            raise
        self._snapshot = data
        self._logger.info(
            f"Loaded snapshot: transactions={len(data.transactions)}, "
            f"bills={len(data.bills)}, cards={len(data.credit_cards)}"
        )
        return data

    def mutate(self, operation: Callable[[RecordStorePort], T]) -> T:
        """Run a store mutation, then refetch the snapshot.

        Args:
            operation: Callable receiving the record store.

        Returns:
            T: Result of the operation.
        """
        try:
            result = operation(self._record_store)
        except RecordStoreError as exc:
            self._logger.error(f"Mutation failed: {exc}")
            raise
        self.refresh()
        return result


__all__ = ["DashboardSession"]
