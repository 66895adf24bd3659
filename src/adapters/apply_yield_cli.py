"""CLI adapter applying one month of yield to an investment."""

import sys

from src.application.errors import RecordNotFoundError
from src.application.use_cases.investment_yields import (
    ApplyInvestmentYieldUseCase,
)
from src.infrastructure.container import build_record_store
from src.infrastructure.logging.logger import get_usage_logger


def main(argv: list[str] | None = None) -> int:
    """Apply the monthly yield to the investment id given as argument."""
    args = sys.argv[1:] if argv is None else argv
    logger = get_usage_logger()
    if len(args) != 1:
        print("Usage: finance-apply-yield <investment-id>")
        return 2

    use_case = ApplyInvestmentYieldUseCase(build_record_store(), logger=logger)
    try:
        investment = use_case.execute(args[0])
    except RecordNotFoundError as exc:
        logger.warning(str(exc))
        print(str(exc))
        return 1

    print(f"{investment.name}: valor atual {investment.current_value:.2f}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
