"""Use cases for installment purchases."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.application.ports.record_store import RecordStorePort
from src.domain.constants import OWNERS
from src.domain.models import (
    FinancialData,
    Installment,
    InstallmentMonth,
    InstallmentPurchase,
)
from src.domain.services.installments import (
    active_installments,
    group_installments_by_month,
    installment_amount,
    paid_date_for,
    total_to_spend,
)
from src.domain.services.normalization import normalize_choice
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


@dataclass(frozen=True)
class InstallmentsOverview:
    """Installment purchases with their schedule grouped by month."""

    purchases: list[InstallmentPurchase]
    months: list[InstallmentMonth]
    pending: list[Installment]
    total_to_spend: Decimal

    def month(self, key: str) -> InstallmentMonth | None:
        """Return the bucket for a ``YYYY-MM`` key, if any."""
        for month in self.months:
            if month.month == key:
                return month
        return None


class CreateInstallmentPurchaseUseCase:
    """Register a purchase; the store creates its installments."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_usage_logger()

    def execute(
        self,
        description: str,
        total_amount: Decimal,
        installments: int,
        origin: str,
        category: str,
        start_date: date,
        credit_card_id: str | None = None,
    ) -> tuple[InstallmentPurchase, list[Installment]]:
        """Create an active purchase split into equal installments.

        Raises:
            ValueError: If the installment count or origin is invalid.
        """
        fields = {
            "description": description,
            "total_amount": total_amount,
            "installments": installments,
            "installment_amount": installment_amount(total_amount, installments),
            "origin": normalize_choice(origin, OWNERS, "origin"),
            "category": category,
            "start_date": start_date,
            "status": "active",
            "credit_card_id": credit_card_id or None,
        }
        purchase, created = self._record_store.create_installment_purchase(fields)
        self._logger.info(
            f"Created installment purchase {purchase.description} "
            f"with {len(created)} installments"
        )
        return purchase, created


class UpdateInstallmentStatusUseCase:
    """Mark an installment as paid or unpaid."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_usage_logger()

    def execute(
        self,
        installment_id: str,
        paid: bool,
        today: date | None = None,
    ) -> Installment:
        """Update the paid flag; paying also records today's date."""
        updates: dict[str, object] = {"paid": paid}
        paid_date = paid_date_for(paid, today or date.today())
        if paid_date is not None:
            updates["paid_date"] = paid_date
        installment = self._record_store.update_installment(
            installment_id, updates
        )
        self._logger.info(f"Installment {installment_id} paid={paid}")
        return installment


class GetInstallmentsOverviewUseCase:
    """Group installments by month and total active purchases."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self, data: FinancialData | None = None) -> InstallmentsOverview:
        snapshot = data or self._record_store.get_financial_data()
        overview = InstallmentsOverview(
            purchases=list(snapshot.installment_purchases),
            months=group_installments_by_month(snapshot.installments),
            pending=active_installments(snapshot.installments),
            total_to_spend=total_to_spend(snapshot.installment_purchases),
        )
        self._logger.info(
            f"Installments overview: purchases={len(overview.purchases)}, "
            f"months={len(overview.months)}, pending={len(overview.pending)}"
        )
        return overview


__all__ = [
    "InstallmentsOverview",
    "CreateInstallmentPurchaseUseCase",
    "UpdateInstallmentStatusUseCase",
    "GetInstallmentsOverviewUseCase",
]
