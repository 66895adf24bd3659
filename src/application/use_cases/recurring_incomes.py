"""Use cases for recurring incomes."""

from decimal import Decimal

from src.application.errors import RecordNotFoundError
from src.application.ports.record_store import RecordStorePort
from src.domain.models import FinancialData, RecurringIncome
from src.domain.services.aggregation import recurring_income_total
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


class GetRecurringIncomeTotalUseCase:
    """Return the monthly total of enabled recurring incomes."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self, data: FinancialData | None = None) -> Decimal:
        snapshot = data or self._record_store.get_financial_data()
        total = recurring_income_total(snapshot.recurring_incomes)
        self._logger.info(f"Recurring income total: {total}")
        return total


class ToggleRecurringIncomeUseCase:
    """Enable or disable a recurring income."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_usage_logger()

    def execute(self, income_id: str) -> RecurringIncome:
        """Flip the enabled flag of a recurring income.

        Raises:
            RecordNotFoundError: If the recurring income does not exist.
        """
        income = next(
            (
                item
                for item in self._record_store.list_recurring_incomes()
                if item.id == income_id
            ),
            None,
        )
        if income is None:
            raise RecordNotFoundError("recurring-incomes", income_id)
        updated = self._record_store.update_recurring_income(
            income_id, {"enabled": not income.enabled}
        )
        self._logger.info(
            f"Recurring income {income.description} enabled={not income.enabled}"
        )
        return updated


__all__ = ["GetRecurringIncomeTotalUseCase", "ToggleRecurringIncomeUseCase"]
