"""Conversion between store JSON payloads and domain records.

Payloads use the camelCase keys of the remote API; domain records and the
field mappings passed to create/update operations use snake_case.
"""

from collections.abc import Mapping
from dataclasses import asdict
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from src.domain.constants import (
    BILL_STATUSES,
    DUE_DATE_TYPES,
    HOLDERS,
    OWNERS,
    PURCHASE_STATUSES,
    TRANSACTION_TYPES,
)
from src.domain.models import (
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
from src.domain.services.normalization import (
    normalize_choice,
    normalize_label,
    normalize_optional_status,
)
from src.utils.date_utils import parse_date, parse_datetime
from src.utils.decimal_utils import coerce_decimal


def to_camel(name: str) -> str:
    """Convert ``invoice_due_date`` to ``invoiceDueDate``."""
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def encode_value(value: Any, decimals_as_text: bool = False) -> Any:
    """Convert a domain value to its JSON representation.

    Args:
        value: Domain value.
        decimals_as_text: Keep Decimal amounts exact as strings instead of
            JSON numbers.

    Returns:
        Any: JSON-compatible value.
    """
    if isinstance(value, Decimal):
        return str(value) if decimals_as_text else float(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def encode_fields(
    fields: Mapping[str, Any],
    decimals_as_text: bool = False,
) -> dict[str, Any]:
    """Convert snake_case domain fields into a camelCase payload."""
    return {
        to_camel(key): encode_value(value, decimals_as_text)
        for key, value in fields.items()
    }


def encode_record(record, decimals_as_text: bool = False) -> dict[str, Any]:
    """Convert a domain record into a camelCase payload."""
    return encode_fields(asdict(record), decimals_as_text)


def _require(payload: Mapping[str, Any], key: str) -> Any:
    if key not in payload or payload[key] is None:
        raise ValueError(f"Missing field '{key}' in payload {payload!r}")
    return payload[key]


def _optional_date(value) -> date | None:
    return parse_date(value) if value else None


def _optional_datetime(value) -> datetime | None:
    return parse_datetime(value) if value else None


def _optional_text(value) -> str | None:
    return str(value) if value else None


def decode_user(payload: Mapping[str, Any]) -> User:
    return User(
        id=str(_require(payload, "id")),
        name=normalize_label(payload.get("name")),
        role=normalize_choice(payload.get("role"), HOLDERS, "role"),
    )


def decode_transaction(payload: Mapping[str, Any]) -> Transaction:
    return Transaction(
        id=str(_require(payload, "id")),
        description=normalize_label(payload.get("description")),
        amount=coerce_decimal(_require(payload, "amount")),
        category=normalize_label(payload.get("category")),
        date=parse_datetime(_require(payload, "date")),
        origin=normalize_choice(payload.get("origin"), OWNERS, "origin"),
        type=normalize_choice(payload.get("type"), TRANSACTION_TYPES, "type"),
    )


def decode_bill(payload: Mapping[str, Any]) -> Bill:
    return Bill(
        id=str(_require(payload, "id")),
        name=normalize_label(payload.get("name")),
        due_date=parse_date(_require(payload, "dueDate")),
        amount=coerce_decimal(_require(payload, "amount")),
        status=normalize_choice(payload.get("status"), BILL_STATUSES, "status"),
        owner=normalize_choice(payload.get("owner"), OWNERS, "owner"),
    )


def decode_credit_card(payload: Mapping[str, Any]) -> CreditCard:
    return CreditCard(
        id=str(_require(payload, "id")),
        holder=normalize_choice(payload.get("holder"), HOLDERS, "holder"),
        card_name=normalize_label(payload.get("cardName")),
        limit=coerce_decimal(_require(payload, "limit")),
        available=coerce_decimal(_require(payload, "available")),
        invoice_amount=coerce_decimal(payload.get("invoiceAmount")),
        invoice_due_date=parse_date(_require(payload, "invoiceDueDate")),
        invoice_status=normalize_optional_status(payload.get("invoiceStatus")),
        color=_optional_text(payload.get("color")),
    )


def decode_investment(payload: Mapping[str, Any]) -> Investment:
    return Investment(
        id=str(_require(payload, "id")),
        name=normalize_label(payload.get("name")),
        type=normalize_label(payload.get("type")),
        amount=coerce_decimal(_require(payload, "amount")),
        current_value=coerce_decimal(_require(payload, "currentValue")),
        owner=normalize_choice(payload.get("owner"), OWNERS, "owner"),
    )


def decode_recurring_income(payload: Mapping[str, Any]) -> RecurringIncome:
    return RecurringIncome(
        id=str(_require(payload, "id")),
        description=normalize_label(payload.get("description")),
        amount=coerce_decimal(_require(payload, "amount")),
        category=normalize_label(payload.get("category")),
        day_of_month=int(_require(payload, "dayOfMonth")),
        origin=normalize_choice(payload.get("origin"), OWNERS, "origin"),
        enabled=bool(payload.get("enabled", False)),
        created_at=_optional_datetime(payload.get("createdAt")),
    )


def decode_installment_purchase(
    payload: Mapping[str, Any],
) -> InstallmentPurchase:
    return InstallmentPurchase(
        id=str(_require(payload, "id")),
        description=normalize_label(payload.get("description")),
        total_amount=coerce_decimal(_require(payload, "totalAmount")),
        installments=int(_require(payload, "installments")),
        installment_amount=coerce_decimal(payload.get("installmentAmount")),
        origin=normalize_choice(payload.get("origin"), OWNERS, "origin"),
        category=normalize_label(payload.get("category")),
        start_date=parse_date(_require(payload, "startDate")),
        status=normalize_choice(
            payload.get("status"), PURCHASE_STATUSES, "status"
        ),
        credit_card_id=_optional_text(payload.get("creditCardId")),
    )


def decode_installment(payload: Mapping[str, Any]) -> Installment:
    return Installment(
        id=str(_require(payload, "id")),
        purchase_id=str(_require(payload, "purchaseId")),
        amount=coerce_decimal(_require(payload, "amount")),
        due_date=parse_date(_require(payload, "dueDate")),
        paid=bool(payload.get("paid", False)),
        paid_date=_optional_date(payload.get("paidDate")),
    )


def decode_due_date(payload: Mapping[str, Any]) -> DueDate:
    return DueDate(
        id=str(_require(payload, "id")),
        name=normalize_label(payload.get("name")),
        day_of_month=int(_require(payload, "dayOfMonth")),
        amount=coerce_decimal(payload.get("amount")),
        type=normalize_choice(payload.get("type"), DUE_DATE_TYPES, "type"),
        owner=normalize_choice(payload.get("owner"), OWNERS, "owner"),
        reference_id=_optional_text(payload.get("referenceId")),
    )


# Snapshot key -> (FinancialData field, decoder)
SNAPSHOT_COLLECTIONS = {
    "users": ("users", decode_user),
    "transactions": ("transactions", decode_transaction),
    "bills": ("bills", decode_bill),
    "creditCards": ("credit_cards", decode_credit_card),
    "investments": ("investments", decode_investment),
    "recurringIncomes": ("recurring_incomes", decode_recurring_income),
    "installmentPurchases": (
        "installment_purchases",
        decode_installment_purchase,
    ),
    "installments": ("installments", decode_installment),
    "dueDates": ("due_dates", decode_due_date),
}


def decode_financial_data(payload: Mapping[str, Any]) -> FinancialData:
    """Decode the full snapshot; missing collections are empty."""
    collections = {}
    for key, (field_name, decoder) in SNAPSHOT_COLLECTIONS.items():
        items = payload.get(key) or []
        collections[field_name] = tuple(decoder(item) for item in items)
    return FinancialData(**collections)


__all__ = [
    "to_camel",
    "encode_value",
    "encode_fields",
    "encode_record",
    "decode_user",
    "decode_transaction",
    "decode_bill",
    "decode_credit_card",
    "decode_investment",
    "decode_recurring_income",
    "decode_installment_purchase",
    "decode_installment",
    "decode_due_date",
    "SNAPSHOT_COLLECTIONS",
    "decode_financial_data",
]
