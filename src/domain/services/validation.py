"""Domain validation helpers."""

from logging import Logger

from src.domain.constants import INVESTMENT_TYPES
from src.domain.models.records import CreditCard, Investment


def validate_credit_card(card: CreditCard, logger: Logger) -> bool:
    """Warn when a card violates the limit/available invariants.

    Args:
        card: Credit card to check.
        logger: Logger used for warnings.

    Returns:
        bool: True when the card has a usable, consistent limit.
    """
    valid = True
    if card.limit <= 0:
        logger.warning(
            f"Credit card {card.card_name} has a non-positive limit: {card.limit}"
        )
        valid = False
    if card.available < 0:
        logger.warning(
            f"Credit card {card.card_name} has negative available credit: "
            f"{card.available}"
        )
    if card.available > card.limit:
        logger.warning(
            f"Credit card {card.card_name} has available={card.available} "
            f"above limit={card.limit}"
        )
    return valid


def validate_investment(investment: Investment, logger: Logger) -> None:
    """Warn about unknown investment types and empty principals.

    Args:
        investment: Investment to check.
        logger: Logger used for warnings.
    """
    if investment.type not in INVESTMENT_TYPES:
        logger.warning(
            f"Unknown investment type for {investment.name}: {investment.type}"
        )
    if investment.amount == 0:
        logger.warning(f"Investment {investment.name} has zero principal")


__all__ = ["validate_credit_card", "validate_investment"]
