"""Use cases projecting and applying investment yields."""

from src.application.ports.record_store import RecordStorePort
from src.domain.constants import FILTER_ALL
from src.domain.models import FinancialData, Investment, InvestmentPortfolioSummary
from src.domain.services.filters import investments_by_owner, investments_by_type
from src.domain.services.investments import (
    apply_monthly_yield,
    compute_investment_portfolio,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


class GetInvestmentYieldsUseCase:
    """Project monthly and annual yields for every investment."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        data: FinancialData | None = None,
        owner: str = FILTER_ALL,
        investment_type: str = FILTER_ALL,
    ) -> InvestmentPortfolioSummary:
        """Return portfolio totals and per-investment projections.

        Args:
            data: Optional snapshot; fetched from the store when omitted.
            owner: Restrict the portfolio to one owner, or "all".
            investment_type: Restrict the portfolio to one type, or "all".

        Returns:
            InvestmentPortfolioSummary: Totals over the selected investments.
        """
        snapshot = data or self._record_store.get_financial_data()
        investments = list(snapshot.investments)
        if owner != FILTER_ALL:
            investments = investments_by_owner(investments, owner)
        if investment_type != FILTER_ALL:
            investments = investments_by_type(investments, investment_type)
        summary = compute_investment_portfolio(investments, self._logger)
        self._logger.info(
            f"Investment portfolio: invested={summary.total_invested}, "
            f"current={summary.total_current}, roi={summary.roi_percent}"
        )
        return summary


class ApplyInvestmentYieldUseCase:
    """Fold one month of projected yield into an investment's value.

    The new current value is principal plus one month of yield, replacing
    the previous current value.
    """

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_usage_logger()

    def execute(self, investment_id: str) -> Investment:
        """Apply the monthly yield to an investment.

        Args:
            investment_id: Id of the investment to update.

        Returns:
            Investment: Updated investment.

        Raises:
            RecordNotFoundError: If the investment does not exist.
        """
        investment = self._record_store.get_investment(investment_id)
        current_value = apply_monthly_yield(investment)
        updated = self._record_store.update_investment(
            investment_id,
            {"current_value": current_value},
        )
        self._logger.info(
            f"Applied yield to {investment.name}: "
            f"{investment.current_value} -> {current_value}"
        )
        return updated


__all__ = ["GetInvestmentYieldsUseCase", "ApplyInvestmentYieldUseCase"]
