"""Domain records mirrored from the remote data store."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Literal

Owner = Literal["partner1", "partner2", "joint"]
Holder = Literal["partner1", "partner2"]
OwnerFilter = Literal["all", "partner1", "partner2", "joint"]
TransactionType = Literal["income", "expense"]
TransactionTypeFilter = Literal["all", "income", "expense"]
PaymentStatus = Literal["pending", "paid"]
PurchaseStatus = Literal["active", "completed"]
DueDateType = Literal["bill", "installment", "income"]


@dataclass(frozen=True)
class User:
    """A household member."""

    id: str
    name: str
    role: Holder


@dataclass(frozen=True)
class Transaction:
    """A posted income or expense.

    Attributes:
        date: Moment the transaction happened.
        origin: Partner (or joint account) the money belongs to.
    """

    id: str
    description: str
    amount: Decimal
    category: str
    date: datetime
    origin: Owner
    type: TransactionType


@dataclass(frozen=True)
class Bill:
    """A dated bill; status only moves from pending to paid."""

    id: str
    name: str
    due_date: date
    amount: Decimal
    status: PaymentStatus
    owner: Owner


@dataclass(frozen=True)
class CreditCard:
    """A credit card and its current invoice.

    Attributes:
        limit: Total credit limit.
        available: Credit still available (``0 <= available <= limit``).
        invoice_status: Invoice payment status; ``None`` means pending.
    """

    id: str
    holder: Holder
    card_name: str
    limit: Decimal
    available: Decimal
    invoice_amount: Decimal
    invoice_due_date: date
    invoice_status: PaymentStatus | None = None
    color: str | None = None

    @property
    def effective_invoice_status(self) -> PaymentStatus:
        """Return the invoice status, defaulting to pending when unset."""
        return self.invoice_status or "pending"

    @property
    def used(self) -> Decimal:
        """Return the consumed part of the limit."""
        return self.limit - self.available


@dataclass(frozen=True)
class Investment:
    """An investment position.

    Attributes:
        amount: Principal invested.
        current_value: Last known market or projected value.
    """

    id: str
    name: str
    type: str
    amount: Decimal
    current_value: Decimal
    owner: Owner


@dataclass(frozen=True)
class RecurringIncome:
    """A projected monthly inflow, not a posted transaction."""

    id: str
    description: str
    amount: Decimal
    category: str
    day_of_month: int
    origin: Owner
    enabled: bool
    created_at: datetime | None = None


@dataclass(frozen=True)
class InstallmentPurchase:
    """A purchase split into monthly installments."""

    id: str
    description: str
    total_amount: Decimal
    installments: int
    installment_amount: Decimal
    origin: Owner
    category: str
    start_date: date
    status: PurchaseStatus
    credit_card_id: str | None = None


@dataclass(frozen=True)
class Installment:
    """A single installment owned by an installment purchase."""

    id: str
    purchase_id: str
    amount: Decimal
    due_date: date
    paid: bool
    paid_date: date | None = None


@dataclass(frozen=True)
class DueDate:
    """A manually curated recurring obligation."""

    id: str
    name: str
    day_of_month: int
    amount: Decimal
    type: DueDateType
    owner: Owner
    reference_id: str | None = None


@dataclass(frozen=True)
class FinancialData:
    """Full snapshot of every collection, as returned by the store."""

    users: tuple[User, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    bills: tuple[Bill, ...] = ()
    credit_cards: tuple[CreditCard, ...] = ()
    investments: tuple[Investment, ...] = ()
    recurring_incomes: tuple[RecurringIncome, ...] = ()
    installment_purchases: tuple[InstallmentPurchase, ...] = ()
    installments: tuple[Installment, ...] = ()
    due_dates: tuple[DueDate, ...] = ()


__all__ = [
    "Owner",
    "Holder",
    "OwnerFilter",
    "TransactionType",
    "TransactionTypeFilter",
    "PaymentStatus",
    "PurchaseStatus",
    "DueDateType",
    "User",
    "Transaction",
    "Bill",
    "CreditCard",
    "Investment",
    "RecurringIncome",
    "InstallmentPurchase",
    "Installment",
    "DueDate",
    "FinancialData",
]
