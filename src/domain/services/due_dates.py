"""Domain services merging obligations into one due-date calendar."""

from collections.abc import Iterable

from src.domain.models import Bill, CreditCard, DueDate, DueDateEntry

PAID_LABEL = ("Paid", "bg-gray-100 text-gray-600")
TYPE_LABELS = {
    "income": ("Receita", "bg-green-100 text-green-800"),
    "bill": ("Conta", "bg-blue-100 text-blue-800"),
    "installment": ("Parcela", "bg-orange-100 text-orange-800"),
    "credit_card": ("Fatura", "bg-purple-100 text-purple-800"),
}
UNKNOWN_LABEL = ("Outro", "bg-gray-100 text-gray-800")


def resolve_label(entry_type: str, status: str | None) -> tuple[str, str]:
    """Return the (label, color class) pair for a calendar entry.

    Args:
        entry_type: Obligation type tag.
        status: Payment status, if any.

    Returns:
        tuple[str, str]: Label and color class; paid entries share one
        label whatever their type.
    """
    if status == "paid":
        return PAID_LABEL
    return TYPE_LABELS.get(entry_type, UNKNOWN_LABEL)


def _entry(**fields) -> DueDateEntry:
    label, color_class = resolve_label(fields["type"], fields.get("status"))
    return DueDateEntry(label=label, color_class=color_class, **fields)


def due_date_entry(due_date: DueDate) -> DueDateEntry:
    """Project an explicit due-date record unchanged."""
    return _entry(
        id=due_date.id,
        name=due_date.name,
        day_of_month=due_date.day_of_month,
        amount=due_date.amount,
        type=due_date.type,
        owner=due_date.owner,
        reference_id=due_date.reference_id,
    )


def bill_entry(bill: Bill) -> DueDateEntry:
    """Project a bill, keeping its status and full due date."""
    return _entry(
        id=bill.id,
        name=bill.name,
        day_of_month=bill.due_date.day,
        amount=bill.amount,
        type="bill",
        owner=bill.owner,
        reference_id=bill.id,
        status=bill.status,
        due_date=bill.due_date,
    )


def invoice_entry(card: CreditCard) -> DueDateEntry:
    """Project a credit-card invoice as ``Fatura <card name>``."""
    return _entry(
        id=f"credit-card-{card.id}",
        name=f"Fatura {card.card_name}",
        day_of_month=card.invoice_due_date.day,
        amount=card.invoice_amount,
        type="credit_card",
        owner=card.holder,
        reference_id=card.id,
        status=card.effective_invoice_status,
        due_date=card.invoice_due_date,
    )


def merge_due_dates(
    due_dates: Iterable[DueDate],
    bills: Iterable[Bill],
    credit_cards: Iterable[CreditCard],
) -> list[DueDateEntry]:
    """Merge explicit due dates, bills and pending invoices.

    Entries are ordered by day of month. The sort is stable, so ties keep
    the source order: explicit records, then bills, then invoices. Cards
    whose invoice is paid or empty are left out.

    Args:
        due_dates: Explicit due-date records.
        bills: Every bill, paid or pending.
        credit_cards: Every credit card.

    Returns:
        list[DueDateEntry]: Chronologically ordered obligations.
    """
    entries = [due_date_entry(item) for item in due_dates]
    entries.extend(bill_entry(bill) for bill in bills)
    entries.extend(
        invoice_entry(card)
        for card in credit_cards
        if card.invoice_amount > 0 and card.effective_invoice_status == "pending"
    )
    return sorted(entries, key=lambda entry: entry.day_of_month)


def entries_for_day(
    entries: Iterable[DueDateEntry],
    day_of_month: int,
) -> list[DueDateEntry]:
    """Return the calendar entries falling on a given day of month."""
    return [entry for entry in entries if entry.day_of_month == day_of_month]


__all__ = [
    "resolve_label",
    "due_date_entry",
    "bill_entry",
    "invoice_entry",
    "merge_due_dates",
    "entries_for_day",
]
