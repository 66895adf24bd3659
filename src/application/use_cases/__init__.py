"""Application use cases package."""

from .bills import BillsOverview, GetBillsOverviewUseCase, MarkBillPaidUseCase
from .credit_cards import GetCreditCardsSummaryUseCase, ToggleInvoiceStatusUseCase
from .dashboard_session import DashboardSession
from .get_dashboard_overview import DashboardOverview, GetDashboardOverviewUseCase
from .get_due_dates_calendar import GetDueDatesCalendarUseCase
from .get_financial_report import GetFinancialReportUseCase
from .get_transactions import GetTransactionsUseCase, TransactionsView
from .installments import (
    CreateInstallmentPurchaseUseCase,
    GetInstallmentsOverviewUseCase,
    InstallmentsOverview,
    UpdateInstallmentStatusUseCase,
)
from .investment_yields import (
    ApplyInvestmentYieldUseCase,
    GetInvestmentYieldsUseCase,
)
from .recurring_incomes import (
    GetRecurringIncomeTotalUseCase,
    ToggleRecurringIncomeUseCase,
)

__all__ = [
    "BillsOverview",
    "GetBillsOverviewUseCase",
    "MarkBillPaidUseCase",
    "GetCreditCardsSummaryUseCase",
    "ToggleInvoiceStatusUseCase",
    "DashboardSession",
    "DashboardOverview",
    "GetDashboardOverviewUseCase",
    "GetDueDatesCalendarUseCase",
    "GetFinancialReportUseCase",
    "GetTransactionsUseCase",
    "TransactionsView",
    "CreateInstallmentPurchaseUseCase",
    "GetInstallmentsOverviewUseCase",
    "InstallmentsOverview",
    "UpdateInstallmentStatusUseCase",
    "ApplyInvestmentYieldUseCase",
    "GetInvestmentYieldsUseCase",
    "GetRecurringIncomeTotalUseCase",
    "ToggleRecurringIncomeUseCase",
]
