"""Domain services for installment purchases."""

from collections.abc import Callable, Iterable
from datetime import date
from decimal import Decimal

from src.domain.models import (
    Installment,
    InstallmentMonth,
    InstallmentPurchase,
)
from src.utils.date_utils import add_months, month_key
from src.utils.decimal_utils import sum_decimals


def installment_amount(total_amount: Decimal, installments: int) -> Decimal:
    """Return the per-installment amount of a purchase.

    Raises:
        ValueError: If the installment count is not positive.
    """
    if installments <= 0:
        raise ValueError(
            f"Installment count must be positive, got {installments}"
        )
    return total_amount / installments


def build_installment_schedule(
    purchase: InstallmentPurchase,
    id_factory: Callable[[int], str] | None = None,
) -> list[Installment]:
    """Return the installments owned by a purchase.

    One installment per ``purchase.installments``, each for the
    per-installment amount, due one calendar month apart starting on the
    purchase start date.

    Args:
        purchase: Purchase owning the installments.
        id_factory: Builds an installment id from its zero-based index.

    Returns:
        list[Installment]: Unpaid installments in due-date order.
    """
    make_id = id_factory or (lambda index: f"{purchase.id}-{index + 1}")
    amount = installment_amount(purchase.total_amount, purchase.installments)
    return [
        Installment(
            id=make_id(index),
            purchase_id=purchase.id,
            amount=amount,
            due_date=add_months(purchase.start_date, index),
            paid=False,
        )
        for index in range(purchase.installments)
    ]


def group_installments_by_month(
    installments: Iterable[Installment],
) -> list[InstallmentMonth]:
    """Group installments by ``YYYY-MM`` of their due date, oldest first."""
    grouped: dict[str, list[Installment]] = {}
    for installment in installments:
        grouped.setdefault(month_key(installment.due_date), []).append(
            installment
        )
    return [
        InstallmentMonth(month=key, installments=grouped[key])
        for key in sorted(grouped)
    ]


def active_installments(installments: Iterable[Installment]) -> list[Installment]:
    """Return unpaid installments."""
    return [installment for installment in installments if not installment.paid]


def total_to_spend(purchases: Iterable[InstallmentPurchase]) -> Decimal:
    """Sum the total amount of active purchases."""
    return sum_decimals(
        purchase.total_amount
        for purchase in purchases
        if purchase.status == "active"
    )


def paid_date_for(paid: bool, today: date) -> date | None:
    """Return the paid date recorded when toggling an installment."""
    return today if paid else None


__all__ = [
    "installment_amount",
    "build_installment_schedule",
    "group_installments_by_month",
    "active_installments",
    "total_to_spend",
    "paid_date_for",
]
