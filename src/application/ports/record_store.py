"""Port for the collection-per-entity finance data store.

Create operations take a mapping of snake_case record fields without an
``id``; the store assigns it. Update operations take a partial mapping and
only change the supplied fields.
"""

from collections.abc import Mapping
from typing import Any, Protocol

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

Fields = Mapping[str, Any]


class RecordStorePort(Protocol):
    """Port exposing CRUD operations and the full snapshot read."""

    def get_financial_data(self) -> FinancialData:
        """Return every collection in one snapshot."""

    def list_users(self) -> list[User]:
        """Return every household member."""

    def list_transactions(self) -> list[Transaction]:
        """Return every transaction."""

    def create_transaction(self, fields: Fields) -> Transaction:
        """Create a transaction."""

    def update_transaction(self, record_id: str, updates: Fields) -> Transaction:
        """Patch a transaction."""

    def delete_transaction(self, record_id: str) -> None:
        """Delete a transaction."""

    def list_bills(self) -> list[Bill]:
        """Return every bill."""

    def create_bill(self, fields: Fields) -> Bill:
        """Create a bill."""

    def update_bill(self, record_id: str, updates: Fields) -> Bill:
        """Patch a bill."""

    def delete_bill(self, record_id: str) -> None:
        """Delete a bill."""

    def list_credit_cards(self) -> list[CreditCard]:
        """Return every credit card."""

    def create_credit_card(self, fields: Fields) -> CreditCard:
        """Create a credit card."""

    def update_credit_card(self, record_id: str, updates: Fields) -> CreditCard:
        """Patch a credit card."""

    def delete_credit_card(self, record_id: str) -> None:
        """Delete a credit card."""

    def list_investments(self) -> list[Investment]:
        """Return every investment."""

    def get_investment(self, record_id: str) -> Investment:
        """Return one investment or raise RecordNotFoundError."""

    def create_investment(self, fields: Fields) -> Investment:
        """Create an investment."""

    def update_investment(self, record_id: str, updates: Fields) -> Investment:
        """Patch an investment."""

    def delete_investment(self, record_id: str) -> None:
        """Delete an investment."""

    def list_recurring_incomes(self) -> list[RecurringIncome]:
        """Return every recurring income."""

    def create_recurring_income(self, fields: Fields) -> RecurringIncome:
        """Create a recurring income; the store stamps ``created_at``."""

    def update_recurring_income(
        self,
        record_id: str,
        updates: Fields,
    ) -> RecurringIncome:
        """Patch a recurring income."""

    def delete_recurring_income(self, record_id: str) -> None:
        """Delete a recurring income."""

    def list_installment_purchases(self) -> list[InstallmentPurchase]:
        """Return every installment purchase."""

    def create_installment_purchase(
        self,
        fields: Fields,
    ) -> tuple[InstallmentPurchase, list[Installment]]:
        """Create a purchase together with its installments."""

    def update_installment_purchase(
        self,
        record_id: str,
        updates: Fields,
    ) -> InstallmentPurchase:
        """Patch an installment purchase."""

    def delete_installment_purchase(self, record_id: str) -> None:
        """Delete a purchase and the installments it owns."""

    def list_installments(
        self,
        purchase_id: str | None = None,
    ) -> list[Installment]:
        """Return installments, optionally for a single purchase."""

    def update_installment(self, record_id: str, updates: Fields) -> Installment:
        """Patch an installment."""

    def list_due_dates(self) -> list[DueDate]:
        """Return every explicit due-date record."""

    def create_due_date(self, fields: Fields) -> DueDate:
        """Create a due-date record."""

    def update_due_date(self, record_id: str, updates: Fields) -> DueDate:
        """Patch a due-date record."""

    def delete_due_date(self, record_id: str) -> None:
        """Delete a due-date record."""


__all__ = ["Fields", "RecordStorePort"]
