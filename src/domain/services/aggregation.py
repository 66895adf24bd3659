"""Domain services aggregating a financial snapshot into totals."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    HIGH_UTILIZATION_THRESHOLD,
    OWNERS,
    PARTNER_LABELS,
)
from src.domain.models import (
    Bill,
    BudgetAlert,
    CategoryAmount,
    CreditCard,
    CreditPortfolioSummary,
    CreditUtilization,
    FinancialData,
    MonthlySummary,
    PartnerComparisonRow,
    RecurringIncome,
    Transaction,
)
from src.domain.services.validation import validate_credit_card
from src.utils.date_utils import in_month
from src.utils.decimal_utils import safe_ratio, sum_decimals


def sum_transactions(
    transactions: Iterable[Transaction],
    kind: str,
    origin: str | None = None,
) -> Decimal:
    """Sum transactions of one type, optionally for a single origin."""
    return sum_decimals(
        transaction.amount
        for transaction in transactions
        if transaction.type == kind
        and (origin is None or transaction.origin == origin)
    )


def recurring_income_total(
    recurring_incomes: Iterable[RecurringIncome],
    origin: str | None = None,
) -> Decimal:
    """Sum enabled recurring incomes, optionally for a single origin."""
    return sum_decimals(
        income.amount
        for income in recurring_incomes
        if income.enabled and (origin is None or income.origin == origin)
    )


def paid_bills_total(
    bills: Iterable[Bill],
    year: int | None = None,
    month: int | None = None,
) -> Decimal:
    """Sum paid bills, restricted to a calendar month when given."""
    return sum_decimals(
        bill.amount
        for bill in bills
        if bill.status == "paid"
        and (year is None or in_month(bill.due_date, year, month))
    )


def paid_invoices_total(
    cards: Iterable[CreditCard],
    year: int,
    month: int,
) -> Decimal:
    """Sum paid invoices whose due date falls in the calendar month."""
    return sum_decimals(
        card.invoice_amount
        for card in cards
        if card.invoice_status == "paid"
        and in_month(card.invoice_due_date, year, month)
    )


def pending_bills_total(bills: Iterable[Bill]) -> Decimal:
    """Sum every pending bill."""
    return sum_decimals(bill.amount for bill in bills if bill.status == "pending")


def pending_invoices_total(cards: Iterable[CreditCard]) -> Decimal:
    """Sum positive invoices that are pending or have no status."""
    return sum_decimals(
        card.invoice_amount
        for card in cards
        if card.invoice_amount > 0 and card.effective_invoice_status == "pending"
    )


def compute_pending_obligations(data: FinancialData) -> Decimal:
    """Return pending bills plus pending credit-card invoices."""
    return pending_bills_total(data.bills) + pending_invoices_total(
        data.credit_cards
    )


def compute_monthly_summary(
    data: FinancialData,
    *,
    today: date,
) -> MonthlySummary:
    """Compute the dashboard totals for the month containing ``today``.

    Recurring incomes count at their full configured amount regardless of
    their day of month. Paid bills and invoices only count when their due
    date falls in the current calendar month.

    Args:
        data: Financial snapshot.
        today: Reference date selecting the current month.

    Returns:
        MonthlySummary: Components of income, expenses and pending totals.
    """
    return MonthlySummary(
        income_from_transactions=sum_transactions(data.transactions, "income"),
        recurring_income=recurring_income_total(data.recurring_incomes),
        expenses_from_transactions=sum_transactions(
            data.transactions, "expense"
        ),
        paid_bills=paid_bills_total(data.bills, today.year, today.month),
        paid_invoices=paid_invoices_total(
            data.credit_cards, today.year, today.month
        ),
        pending_bills=pending_bills_total(data.bills),
        pending_invoices=pending_invoices_total(data.credit_cards),
        total_investments=sum_decimals(
            investment.current_value for investment in data.investments
        ),
    )


def compute_credit_utilization(
    card: CreditCard,
    logger: Logger | None = None,
) -> CreditUtilization:
    """Compute the utilization ratio of a credit card.

    A card without a positive limit reports a zero ratio, is never flagged
    and is marked invalid.

    Args:
        card: Credit card to evaluate.
        logger: Optional logger used for invariant warnings.

    Returns:
        CreditUtilization: Ratio and high-utilization flag.
    """
    valid = card.limit > 0
    if logger is not None:
        valid = validate_credit_card(card, logger)
    if not valid:
        return CreditUtilization(
            card_id=card.id,
            card_name=card.card_name,
            ratio=Decimal("0"),
            is_high=False,
            valid=False,
        )
    ratio = card.used / card.limit
    return CreditUtilization(
        card_id=card.id,
        card_name=card.card_name,
        ratio=ratio,
        is_high=ratio > HIGH_UTILIZATION_THRESHOLD,
    )


def compute_credit_portfolio(
    cards: Iterable[CreditCard],
    logger: Logger | None = None,
) -> CreditPortfolioSummary:
    """Aggregate limits, usage and invoices across cards."""
    cards = list(cards)
    total_limit = sum_decimals(card.limit for card in cards)
    total_used = sum_decimals(card.used for card in cards)
    return CreditPortfolioSummary(
        total_limit=total_limit,
        total_used=total_used,
        total_invoice=sum_decimals(card.invoice_amount for card in cards),
        total_available=sum_decimals(card.available for card in cards),
        utilization_ratio=safe_ratio(total_used, total_limit),
        cards=[compute_credit_utilization(card, logger) for card in cards],
    )


def build_budget_alerts(cards: Iterable[CreditCard]) -> list[BudgetAlert]:
    """Return one warning per card above the utilization threshold."""
    alerts: list[BudgetAlert] = []
    for card in cards:
        utilization = compute_credit_utilization(card)
        if not utilization.is_high:
            continue
        percent = utilization.percent.quantize(Decimal("1"))
        alerts.append(
            BudgetAlert(
                type="credit_card",
                message=(
                    f"{card.card_name} está com {percent}% de utilização"
                ),
                severity="warning",
            )
        )
    return alerts


def compute_category_totals(
    transactions: Iterable[Transaction],
    kind: str,
) -> dict[str, Decimal]:
    """Sum transaction amounts per category for one transaction type."""
    totals: dict[str, Decimal] = {}
    for transaction in transactions:
        if transaction.type != kind:
            continue
        totals[transaction.category] = (
            totals.get(transaction.category, Decimal("0")) + transaction.amount
        )
    return totals


def rank_categories(totals: dict[str, Decimal]) -> list[CategoryAmount]:
    """Return category totals sorted by amount, largest first."""
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryAmount(category=category, amount=amount)
        for category, amount in ranked
    ]


def compute_partner_comparison(
    data: FinancialData,
) -> list[PartnerComparisonRow]:
    """Return income and expenses for partner1, partner2 and joint.

    Income includes enabled recurring incomes of the same origin; expenses
    only count transactions.
    """
    return [
        PartnerComparisonRow(
            origin=origin,
            label=PARTNER_LABELS[origin],
            income=sum_transactions(data.transactions, "income", origin)
            + recurring_income_total(data.recurring_incomes, origin),
            expenses=sum_transactions(data.transactions, "expense", origin),
        )
        for origin in OWNERS
    ]


__all__ = [
    "sum_transactions",
    "recurring_income_total",
    "paid_bills_total",
    "paid_invoices_total",
    "pending_bills_total",
    "pending_invoices_total",
    "compute_pending_obligations",
    "compute_monthly_summary",
    "compute_credit_utilization",
    "compute_credit_portfolio",
    "build_budget_alerts",
    "compute_category_totals",
    "rank_categories",
    "compute_partner_comparison",
]
