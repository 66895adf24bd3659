"""Tests for the JSON payload codec."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.domain.models import Installment
from src.infrastructure.record_codec import (
    decode_credit_card,
    decode_financial_data,
    decode_transaction,
    encode_fields,
    encode_record,
    to_camel,
)


def test_to_camel():
    assert to_camel("invoice_due_date") == "invoiceDueDate"
    assert to_camel("amount") == "amount"


def test_encode_fields_converts_values():
    payload = encode_fields(
        {
            "current_value": Decimal("10.5"),
            "start_date": date(2026, 1, 31),
            "enabled": True,
        }
    )

    assert payload == {
        "currentValue": 10.5,
        "startDate": "2026-01-31",
        "enabled": True,
    }


def test_encode_fields_keeps_decimals_exact_as_text():
    amount = Decimal("1012.1537412345678901")

    payload = encode_fields({"amount": amount}, decimals_as_text=True)

    assert payload == {"amount": "1012.1537412345678901"}
    assert Decimal(payload["amount"]) == amount


def test_encode_record_uses_camel_case_keys():
    installment = Installment(
        id="i1",
        purchase_id="p1",
        amount=Decimal("300"),
        due_date=date(2026, 2, 28),
        paid=False,
    )

    assert encode_record(installment) == {
        "id": "i1",
        "purchaseId": "p1",
        "amount": 300.0,
        "dueDate": "2026-02-28",
        "paid": False,
        "paidDate": None,
    }


def test_decode_transaction_normalizes_enums():
    transaction = decode_transaction(
        {
            "id": 7,
            "description": " Mercado ",
            "amount": 12.3,
            "category": "Supermercado",
            "date": "2026-10-05T10:00:00.000Z",
            "origin": "Joint",
            "type": "expense",
        }
    )

    assert transaction.id == "7"
    assert transaction.description == "Mercado"
    assert transaction.amount == Decimal("12.3")
    assert transaction.origin == "joint"
    assert transaction.date.day == 5


def test_decode_credit_card_without_status():
    card = decode_credit_card(
        {
            "id": "c1",
            "holder": "partner1",
            "cardName": "Nubank",
            "limit": 5000,
            "available": 1000,
            "invoiceAmount": 900,
            "invoiceDueDate": "2026-10-03",
        }
    )

    assert card.invoice_status is None
    assert card.effective_invoice_status == "pending"
    assert card.used == Decimal("4000")


def test_decode_rejects_unknown_choice():
    with pytest.raises(ValueError):
        decode_transaction(
            {
                "id": "t",
                "amount": 1,
                "date": "2026-10-05",
                "origin": "neighbour",
                "type": "expense",
            }
        )


def test_decode_rejects_missing_required_field():
    with pytest.raises(ValueError):
        decode_transaction({"id": "t", "origin": "joint", "type": "income"})


def test_decode_financial_data_treats_missing_collections_as_empty():
    data = decode_financial_data(
        {
            "recurringIncomes": [
                {
                    "id": "r1",
                    "description": "Salário",
                    "amount": 3000,
                    "category": "Salário",
                    "dayOfMonth": 5,
                    "origin": "partner1",
                    "enabled": True,
                    "createdAt": "2026-01-01T00:00:00Z",
                }
            ]
        }
    )

    assert data.transactions == ()
    assert data.recurring_incomes[0].created_at.year == 2026
    assert isinstance(data.recurring_incomes[0].created_at, datetime)
