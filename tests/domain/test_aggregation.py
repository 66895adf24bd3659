"""Tests for the aggregation domain services."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import (
    Bill,
    CreditCard,
    FinancialData,
    RecurringIncome,
    Transaction,
)
from src.domain.services.aggregation import (
    build_budget_alerts,
    compute_category_totals,
    compute_credit_portfolio,
    compute_credit_utilization,
    compute_monthly_summary,
    compute_partner_comparison,
    compute_pending_obligations,
    rank_categories,
)

TODAY = date(2026, 10, 19)


def _transaction(
    amount: str,
    kind: str,
    category: str = "Outros",
    origin: str = "joint",
    when: datetime = datetime(2026, 10, 5, 12, 0),
) -> Transaction:
    return Transaction(
        id=f"t-{amount}-{kind}",
        description="x",
        amount=Decimal(amount),
        category=category,
        date=when,
        origin=origin,
        type=kind,
    )


def _card(
    limit: str,
    available: str,
    invoice: str = "0",
    status: str | None = None,
    due: date = date(2026, 10, 3),
    name: str = "Nubank",
) -> CreditCard:
    return CreditCard(
        id=f"c-{name}",
        holder="partner1",
        card_name=name,
        limit=Decimal(limit),
        available=Decimal(available),
        invoice_amount=Decimal(invoice),
        invoice_due_date=due,
        invoice_status=status,
    )


def _bill(amount: str, status: str, due: date) -> Bill:
    return Bill(
        id=f"b-{amount}-{due.isoformat()}",
        name="Luz",
        due_date=due,
        amount=Decimal(amount),
        status=status,
        owner="joint",
    )


def _income(amount: str, enabled: bool, origin: str = "partner1"):
    return RecurringIncome(
        id=f"r-{amount}",
        description="Salário",
        amount=Decimal(amount),
        category="Salário",
        day_of_month=5,
        origin=origin,
        enabled=enabled,
    )


def test_monthly_summary_combines_income_and_expense_sources():
    """Paid bills and invoices only count when due in the current month."""
    data = FinancialData(
        transactions=(
            _transaction("1000", "income"),
            _transaction("200", "expense"),
        ),
        recurring_incomes=(_income("3000", True), _income("500", False)),
        bills=(
            _bill("150", "paid", date(2026, 10, 10)),
            _bill("90", "paid", date(2026, 9, 10)),
            _bill("80", "pending", date(2026, 11, 1)),
        ),
        credit_cards=(
            _card("1000", "600", invoice="400", status="paid"),
            _card("2000", "1500", invoice="500", name="Inter"),
        ),
    )

    summary = compute_monthly_summary(data, today=TODAY)

    assert summary.monthly_income == Decimal("4000")
    assert summary.monthly_expenses == Decimal("750")
    assert summary.net_balance == Decimal("3250")
    assert summary.pending_bills == Decimal("80")
    assert summary.pending_invoices == Decimal("500")
    assert summary.pending_total == Decimal("580")


def test_net_balance_matches_income_minus_expenses():
    """Net balance must always equal income minus expenses."""
    data = FinancialData(
        transactions=(
            _transaction("10.10", "income"),
            _transaction("99.99", "expense"),
        ),
        bills=(_bill("0.01", "paid", TODAY),),
    )

    summary = compute_monthly_summary(data, today=TODAY)

    assert summary.net_balance == summary.monthly_income - summary.monthly_expenses
    assert summary.net_balance == Decimal("-89.90")


def test_pending_obligations_ignore_zero_and_paid_invoices():
    """Only positive invoices that are pending or unset are obligations."""
    data = FinancialData(
        bills=(_bill("100", "pending", TODAY), _bill("40", "paid", TODAY)),
        credit_cards=(
            _card("1000", "1000", invoice="0"),
            _card("1000", "800", invoice="200", status="paid", name="Inter"),
            _card("1000", "700", invoice="300", status="pending", name="C6"),
            _card("1000", "950", invoice="50", name="XP"),
        ),
    )

    assert compute_pending_obligations(data) == Decimal("450")


def test_utilization_at_threshold_is_not_flagged():
    """A card at exactly 80% must not be flagged as high."""
    utilization = compute_credit_utilization(_card("1000", "200"))

    assert utilization.ratio == Decimal("0.8")
    assert utilization.is_high is False


def test_utilization_above_threshold_is_flagged():
    utilization = compute_credit_utilization(_card("1000", "150"))

    assert utilization.is_high is True
    assert utilization.percent == Decimal("85.0")


def test_utilization_with_zero_limit_is_invalid_and_warns():
    """A zero limit should not divide and should log a warning."""
    logger = MagicMock()

    utilization = compute_credit_utilization(_card("0", "0"), logger)

    assert utilization.ratio == Decimal("0")
    assert utilization.is_high is False
    assert utilization.valid is False
    logger.warning.assert_called_once()


def test_credit_portfolio_totals_and_high_cards():
    cards = [_card("1000", "100", invoice="900"), _card("0", "0", name="Zero")]

    portfolio = compute_credit_portfolio(cards)

    assert portfolio.total_limit == Decimal("1000")
    assert portfolio.total_used == Decimal("900")
    assert portfolio.total_invoice == Decimal("900")
    assert portfolio.utilization_ratio == Decimal("0.9")
    assert [card.card_name for card in portfolio.high_utilization_cards] == [
        "Nubank"
    ]


def test_budget_alerts_describe_high_utilization_cards():
    alerts = build_budget_alerts(
        [_card("1000", "100"), _card("1000", "500", name="Inter")]
    )

    assert len(alerts) == 1
    assert alerts[0].message == "Nubank está com 90% de utilização"
    assert alerts[0].severity == "warning"


def test_category_totals_are_ranked_descending():
    transactions = [
        _transaction("50", "expense", category="Transporte"),
        _transaction("120", "expense", category="Supermercado"),
        _transaction("30", "expense", category="Transporte"),
        _transaction("999", "income", category="Salário"),
    ]

    ranked = rank_categories(compute_category_totals(transactions, "expense"))

    assert [(item.category, item.amount) for item in ranked] == [
        ("Supermercado", Decimal("120")),
        ("Transporte", Decimal("80")),
    ]


def test_partner_comparison_includes_recurring_income_by_origin():
    data = FinancialData(
        transactions=(
            _transaction("100", "income", origin="partner2"),
            _transaction("40", "expense", origin="partner2"),
            _transaction("60", "expense", origin="joint"),
        ),
        recurring_incomes=(_income("2000", True, origin="partner1"),),
    )

    rows = {row.origin: row for row in compute_partner_comparison(data)}

    assert list(rows) == ["partner1", "partner2", "joint"]
    assert rows["partner1"].income == Decimal("2000")
    assert rows["partner2"].balance == Decimal("60")
    assert rows["joint"].expenses == Decimal("60")


def test_category_totals_agree_with_net_balance():
    """Category totals of a transaction-only snapshot add up to net balance."""
    transactions = (
        _transaction("1200.50", "income", category="Salário"),
        _transaction("300", "income", category="Freelancer"),
        _transaction("45.25", "expense", category="Transporte"),
        _transaction("610", "expense", category="Aluguel"),
        _transaction("5", "expense", category="Transporte"),
    )
    data = FinancialData(transactions=transactions)

    income = sum(compute_category_totals(transactions, "income").values())
    expenses = sum(compute_category_totals(transactions, "expense").values())

    assert income - expenses == compute_monthly_summary(
        data, today=TODAY
    ).net_balance
