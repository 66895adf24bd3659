"""Domain models package."""

from .finance import (
    BudgetAlert,
    CategoryAmount,
    CreditPortfolioSummary,
    CreditUtilization,
    DueDateEntry,
    InstallmentMonth,
    InvestmentPortfolioSummary,
    InvestmentYield,
    MonthlySummary,
    PartnerComparisonRow,
    ReportSummary,
    TrendPoint,
)
from .records import (
    Bill,
    CreditCard,
    DueDate,
    FinancialData,
    Installment,
    InstallmentPurchase,
    Investment,
    RecurringIncome,
    Transaction,
    User,
)

__all__ = [
    "Bill",
    "CreditCard",
    "DueDate",
    "FinancialData",
    "Installment",
    "InstallmentPurchase",
    "Investment",
    "RecurringIncome",
    "Transaction",
    "User",
    "BudgetAlert",
    "CategoryAmount",
    "CreditPortfolioSummary",
    "CreditUtilization",
    "DueDateEntry",
    "InstallmentMonth",
    "InvestmentPortfolioSummary",
    "InvestmentYield",
    "MonthlySummary",
    "PartnerComparisonRow",
    "ReportSummary",
    "TrendPoint",
]
