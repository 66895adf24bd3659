"""Tests for the unified due-date calendar."""

from datetime import date
from decimal import Decimal

from src.domain.models import Bill, CreditCard, DueDate
from src.domain.services.due_dates import (
    entries_for_day,
    merge_due_dates,
    resolve_label,
)


def _due_date(day: int, name: str = "Aluguel", kind: str = "bill") -> DueDate:
    return DueDate(
        id=f"d-{day}",
        name=name,
        day_of_month=day,
        amount=Decimal("1500"),
        type=kind,
        owner="joint",
    )


def _bill(day: int, status: str = "pending") -> Bill:
    return Bill(
        id=f"b-{day}",
        name="Internet",
        due_date=date(2026, 10, day),
        amount=Decimal("120"),
        status=status,
        owner="partner2",
    )


def _card(day: int, invoice: str, status: str | None = None) -> CreditCard:
    return CreditCard(
        id=f"c-{day}",
        holder="partner1",
        card_name="Nubank",
        limit=Decimal("5000"),
        available=Decimal("4000"),
        invoice_amount=Decimal(invoice),
        invoice_due_date=date(2026, 10, day),
        invoice_status=status,
    )


def test_merge_orders_entries_by_day_of_month():
    entries = merge_due_dates([_due_date(20)], [_bill(15)], [_card(3, "800")])

    assert [entry.day_of_month for entry in entries] == [3, 15, 20]
    assert [entry.type for entry in entries] == ["credit_card", "bill", "bill"]
    invoice = entries[0]
    assert invoice.id == "credit-card-c-3"
    assert invoice.name == "Fatura Nubank"
    assert invoice.owner == "partner1"
    assert invoice.label == "Fatura"


def test_paid_invoices_and_empty_invoices_are_left_out():
    entries = merge_due_dates(
        [],
        [],
        [_card(3, "800", status="paid"), _card(4, "0"), _card(5, "10", "pending")],
    )

    assert [entry.reference_id for entry in entries] == ["c-5"]


def test_paid_bills_stay_in_calendar_with_paid_label():
    entries = merge_due_dates([], [_bill(10, status="paid")], [])

    assert len(entries) == 1
    assert entries[0].is_paid
    assert entries[0].label == "Paid"
    assert entries[0].due_date == date(2026, 10, 10)


def test_ties_keep_source_order():
    entries = merge_due_dates(
        [_due_date(10, name="Condomínio")],
        [_bill(10)],
        [_card(10, "50")],
    )

    assert [entry.name for entry in entries] == [
        "Condomínio",
        "Internet",
        "Fatura Nubank",
    ]


def test_resolve_label_by_type():
    assert resolve_label("income", None)[0] == "Receita"
    assert resolve_label("installment", "pending")[0] == "Parcela"
    assert resolve_label("bill", "paid")[0] == "Paid"


def test_entries_for_day_filters_calendar():
    entries = merge_due_dates([_due_date(5), _due_date(6)], [], [])

    assert [entry.id for entry in entries_for_day(entries, 6)] == ["d-6"]
