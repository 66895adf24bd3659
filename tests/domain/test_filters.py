"""Tests for record selection helpers."""

from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import FILTER_ALL
from src.domain.models import Bill, Investment, Transaction
from src.domain.services.filters import (
    bills_by_owner,
    filter_transactions,
    investments_by_owner,
    investments_by_type,
    overdue_bills,
    transactions_by_category,
    transactions_in_range,
    upcoming_bills,
)

TODAY = date(2026, 10, 19)


def _transaction(tid: str, kind: str, origin: str, day: int = 1):
    return Transaction(
        id=tid,
        description=tid,
        amount=Decimal("10"),
        category="Outros",
        date=datetime(2026, 10, day),
        origin=origin,
        type=kind,
    )


def _bill(bid: str, due: date, status: str = "pending", owner: str = "joint"):
    return Bill(
        id=bid,
        name=bid,
        due_date=due,
        amount=Decimal("10"),
        status=status,
        owner=owner,
    )


def test_filter_transactions_by_type_and_origin():
    transactions = [
        _transaction("a", "income", "partner1"),
        _transaction("b", "expense", "partner1"),
        _transaction("c", "expense", "joint"),
    ]

    assert [t.id for t in filter_transactions(transactions)] == ["a", "b", "c"]
    assert [
        t.id for t in filter_transactions(transactions, "expense", FILTER_ALL)
    ] == ["b", "c"]
    assert [
        t.id for t in filter_transactions(transactions, "expense", "partner1")
    ] == ["b"]
    assert [
        t.id for t in filter_transactions(transactions, FILTER_ALL, "joint")
    ] == ["c"]


def test_transactions_in_range_is_inclusive():
    transactions = [
        _transaction("a", "income", "joint", day=1),
        _transaction("b", "income", "joint", day=10),
        _transaction("c", "income", "joint", day=20),
    ]

    selected = transactions_in_range(
        transactions, datetime(2026, 10, 1), datetime(2026, 10, 10)
    )

    assert [t.id for t in selected] == ["a", "b"]


def test_upcoming_and_overdue_bills():
    bills = [
        _bill("late", date(2026, 10, 1)),
        _bill("soon", date(2026, 11, 2)),
        _bill("today", TODAY),
        _bill("far", date(2026, 12, 31)),
        _bill("paid", date(2026, 10, 25), status="paid"),
    ]

    assert [b.id for b in upcoming_bills(bills, today=TODAY)] == [
        "today",
        "soon",
    ]
    assert [b.id for b in overdue_bills(bills, today=TODAY)] == ["late"]


def test_bills_by_owner_and_investments_by_type():
    bills = [_bill("a", TODAY, owner="partner1"), _bill("b", TODAY)]
    investments = [
        Investment("i1", "CDB Banco", "CDB", Decimal("1"), Decimal("1"), "joint"),
        Investment("i2", "Tesouro", "Títulos", Decimal("1"), Decimal("1"), "joint"),
    ]

    assert [b.id for b in bills_by_owner(bills, "partner1")] == ["a"]
    assert [i.id for i in investments_by_type(investments, "CDB")] == ["i1"]


def test_investments_by_owner():
    investments = [
        Investment("i1", "CDB Banco", "CDB", Decimal("1"), Decimal("1"), "partner1"),
        Investment("i2", "Tesouro", "Títulos", Decimal("1"), Decimal("1"), "joint"),
    ]

    assert [i.id for i in investments_by_owner(investments, "joint")] == ["i2"]
    assert investments_by_owner(investments, "partner2") == []


def test_transactions_by_category():
    transactions = [_transaction("a", "expense", "joint")]

    assert transactions_by_category(transactions, "Outros") == transactions
    assert transactions_by_category(transactions, "Saúde") == []
