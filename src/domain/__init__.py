"""Domain package for business rules and core models."""

from .constants import INVESTMENT_TYPES, OWNERS, TRANSACTION_CATEGORIES
from .models import FinancialData

__all__ = [
    "FinancialData",
    "INVESTMENT_TYPES",
    "OWNERS",
    "TRANSACTION_CATEGORIES",
]
