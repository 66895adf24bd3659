"""Use cases for credit cards and their invoices."""

from src.application.errors import RecordNotFoundError
from src.application.ports.record_store import RecordStorePort
from src.domain.models import CreditCard, CreditPortfolioSummary, FinancialData
from src.domain.services.aggregation import compute_credit_portfolio
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


class GetCreditCardsSummaryUseCase:
    """Aggregate limits, usage and invoices across cards."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self, data: FinancialData | None = None) -> CreditPortfolioSummary:
        snapshot = data or self._record_store.get_financial_data()
        summary = compute_credit_portfolio(snapshot.credit_cards, self._logger)
        self._logger.info(
            f"Credit cards: limit={summary.total_limit}, "
            f"used={summary.total_used}, "
            f"high_utilization={len(summary.high_utilization_cards)}"
        )
        return summary


class ToggleInvoiceStatusUseCase:
    """Flip a card invoice between pending and paid.

    An invoice without status counts as pending and becomes paid.
    """

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_usage_logger()

    def execute(self, card_id: str) -> CreditCard:
        """Toggle the invoice status of a card.

        Raises:
            RecordNotFoundError: If the card does not exist.
        """
        card = next(
            (
                item
                for item in self._record_store.list_credit_cards()
                if item.id == card_id
            ),
            None,
        )
        if card is None:
            raise RecordNotFoundError("credit-cards", card_id)
        new_status = (
            "pending" if card.effective_invoice_status == "paid" else "paid"
        )
        updated = self._record_store.update_credit_card(
            card_id, {"invoice_status": new_status}
        )
        self._logger.info(f"Invoice of {card.card_name} marked as {new_status}")
        return updated


__all__ = ["GetCreditCardsSummaryUseCase", "ToggleInvoiceStatusUseCase"]
