"""Domain models for derived finance views."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from .records import Installment, Owner


@dataclass(frozen=True)
class MonthlySummary:
    """Income, expense and pending totals for the current month.

    Attributes:
        income_from_transactions: Sum of income transactions.
        recurring_income: Sum of enabled recurring incomes.
        expenses_from_transactions: Sum of expense transactions.
        paid_bills: Paid bills due in the current month.
        paid_invoices: Paid card invoices due in the current month.
        pending_bills: Sum of every pending bill.
        pending_invoices: Sum of pending (or unset) positive invoices.
        total_investments: Sum of investment current values.
    """

    income_from_transactions: Decimal
    recurring_income: Decimal
    expenses_from_transactions: Decimal
    paid_bills: Decimal
    paid_invoices: Decimal
    pending_bills: Decimal
    pending_invoices: Decimal
    total_investments: Decimal

    @property
    def monthly_income(self) -> Decimal:
        """Return transaction income plus recurring income."""
        return self.income_from_transactions + self.recurring_income

    @property
    def monthly_expenses(self) -> Decimal:
        """Return expenses plus this month's paid bills and invoices."""
        return (
            self.expenses_from_transactions
            + self.paid_bills
            + self.paid_invoices
        )

    @property
    def net_balance(self) -> Decimal:
        """Return monthly_income minus monthly_expenses."""
        return self.monthly_income - self.monthly_expenses

    @property
    def pending_total(self) -> Decimal:
        """Return pending bills plus pending invoices."""
        return self.pending_bills + self.pending_invoices


@dataclass(frozen=True)
class CreditUtilization:
    """Utilization of a single credit card.

    Attributes:
        ratio: ``(limit - available) / limit``; zero when the limit is zero.
        is_high: True when the ratio is strictly above the alert threshold.
        valid: False when the card has no usable limit.
    """

    card_id: str
    card_name: str
    ratio: Decimal
    is_high: bool
    valid: bool = True

    @property
    def percent(self) -> Decimal:
        """Return the ratio expressed as a percentage."""
        return self.ratio * 100


@dataclass(frozen=True)
class CreditPortfolioSummary:
    """Totals across every credit card."""

    total_limit: Decimal
    total_used: Decimal
    total_invoice: Decimal
    total_available: Decimal
    utilization_ratio: Decimal
    cards: list[CreditUtilization]

    @property
    def high_utilization_cards(self) -> list[CreditUtilization]:
        """Return cards flagged for high utilization."""
        return [card for card in self.cards if card.is_high]


@dataclass(frozen=True)
class BudgetAlert:
    """User-facing alert raised by a derived metric."""

    type: str
    message: str
    severity: str


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated for a transaction category."""

    category: str
    amount: Decimal


@dataclass(frozen=True)
class PartnerComparisonRow:
    """Income and expense totals for one origin."""

    origin: Owner
    label: str
    income: Decimal
    expenses: Decimal

    @property
    def balance(self) -> Decimal:
        """Return income minus expenses."""
        return self.income - self.expenses


@dataclass(frozen=True)
class InvestmentYield:
    """Projected yield for an investment."""

    investment_id: str
    name: str
    type: str
    monthly: Decimal
    roi_percent: Decimal

    @property
    def annual(self) -> Decimal:
        """Return the simple (non-compounded) annualized yield."""
        return self.monthly * 12


@dataclass(frozen=True)
class InvestmentPortfolioSummary:
    """Totals and projections across every investment."""

    total_invested: Decimal
    total_current: Decimal
    roi_percent: Decimal
    yields: list[InvestmentYield]

    @property
    def total_gain(self) -> Decimal:
        """Return total_current minus total_invested."""
        return self.total_current - self.total_invested


@dataclass(frozen=True)
class DueDateEntry:
    """A single obligation in the unified due-date calendar.

    Attributes:
        type: ``bill``, ``installment``, ``income`` or ``credit_card``.
        status: Payment status when the source record carries one.
        due_date: Full due date when the source record carries one.
    """

    id: str
    name: str
    day_of_month: int
    amount: Decimal
    type: str
    owner: str
    label: str
    color_class: str
    reference_id: str | None = None
    status: str | None = None
    due_date: date | None = None

    @property
    def is_paid(self) -> bool:
        return self.status == "paid"


@dataclass(frozen=True)
class TrendPoint:
    """Income and expenses accumulated in one time bucket."""

    label: str
    income: Decimal
    expenses: Decimal

    @property
    def net(self) -> Decimal:
        return self.income - self.expenses


@dataclass(frozen=True)
class InstallmentMonth:
    """Installments falling due in one ``YYYY-MM`` month."""

    month: str
    installments: list[Installment] = field(default_factory=list)

    @property
    def total(self) -> Decimal:
        return sum(
            (installment.amount for installment in self.installments),
            Decimal("0"),
        )

    @property
    def paid_total(self) -> Decimal:
        return sum(
            (
                installment.amount
                for installment in self.installments
                if installment.paid
            ),
            Decimal("0"),
        )


@dataclass(frozen=True)
class ReportSummary:
    """Figures shown on the financial report screen."""

    total_income: Decimal
    total_expenses: Decimal
    average_monthly_expense: Decimal
    expenses_by_category: list[CategoryAmount]
    income_by_category: list[CategoryAmount]
    partner_comparison: list[PartnerComparisonRow]
    monthly_trend: list[TrendPoint]

    @property
    def net_balance(self) -> Decimal:
        """Return total_income minus total_expenses."""
        return self.total_income - self.total_expenses

    @property
    def highest_expense_category(self) -> CategoryAmount | None:
        return self.expenses_by_category[0] if self.expenses_by_category else None

    @property
    def highest_income_category(self) -> CategoryAmount | None:
        return self.income_by_category[0] if self.income_by_category else None


__all__ = [
    "MonthlySummary",
    "CreditUtilization",
    "CreditPortfolioSummary",
    "BudgetAlert",
    "CategoryAmount",
    "PartnerComparisonRow",
    "InvestmentYield",
    "InvestmentPortfolioSummary",
    "DueDateEntry",
    "TrendPoint",
    "InstallmentMonth",
    "ReportSummary",
]
