"""Domain services projecting investment yields."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    CDB_RATE_MULTIPLIER,
    CDB_REFERENCE_RATE,
    POUPANCA_MONTHLY_RATE,
    RENDA_FIXA_MONTHLY_RATE,
)
from src.domain.models import (
    Investment,
    InvestmentPortfolioSummary,
    InvestmentYield,
)
from src.domain.services.validation import validate_investment
from src.utils.decimal_utils import safe_ratio, sum_decimals


def cdb_monthly_rate() -> Decimal:
    """Return the monthly rate equivalent to the CDB annual rate."""
    annual_rate = CDB_REFERENCE_RATE * CDB_RATE_MULTIPLIER
    return (1 + annual_rate) ** (Decimal(1) / Decimal(12)) - 1


def compute_monthly_yield(investment: Investment) -> Decimal:
    """Return the projected yield of one month for an investment.

    CDB compounds 120% of the reference rate monthly, Renda Fixa and
    Poupança pay a flat monthly rate on the principal, and every other type
    only reports the gain already realized (never negative).

    Args:
        investment: Investment to evaluate.

    Returns:
        Decimal: Monthly yield amount.
    """
    if investment.type == "CDB":
        return investment.amount * cdb_monthly_rate()
    if investment.type == "Renda Fixa":
        return investment.amount * RENDA_FIXA_MONTHLY_RATE
    if investment.type == "Poupança":
        return investment.amount * POUPANCA_MONTHLY_RATE
    return max(Decimal("0"), investment.current_value - investment.amount)


def compute_roi_percent(invested: Decimal, current: Decimal) -> Decimal:
    """Return the return on investment in percent; zero without principal."""
    return safe_ratio(current - invested, invested) * 100


def project_yield(investment: Investment) -> InvestmentYield:
    """Return the monthly/annual projection and ROI of an investment."""
    return InvestmentYield(
        investment_id=investment.id,
        name=investment.name,
        type=investment.type,
        monthly=compute_monthly_yield(investment),
        roi_percent=compute_roi_percent(
            investment.amount, investment.current_value
        ),
    )


def apply_monthly_yield(investment: Investment) -> Decimal:
    """Return the current value after applying one month of yield.

    The value is recomputed from the principal, so applying it again
    yields the same figure instead of compounding.
    """
    return investment.amount + compute_monthly_yield(investment)


def compute_investment_portfolio(
    investments: Iterable[Investment],
    logger: Logger | None = None,
) -> InvestmentPortfolioSummary:
    """Aggregate principal, current value and projections."""
    investments = list(investments)
    if logger is not None:
        for investment in investments:
            validate_investment(investment, logger)
    total_invested = sum_decimals(item.amount for item in investments)
    total_current = sum_decimals(item.current_value for item in investments)
    return InvestmentPortfolioSummary(
        total_invested=total_invested,
        total_current=total_current,
        roi_percent=compute_roi_percent(total_invested, total_current),
        yields=[project_yield(item) for item in investments],
    )


__all__ = [
    "cdb_monthly_rate",
    "compute_monthly_yield",
    "compute_roi_percent",
    "project_yield",
    "apply_monthly_yield",
    "compute_investment_portfolio",
]
