"""Record store backed by the finance REST API."""

from collections.abc import Callable, Mapping
from typing import Any

import requests

from src.application.errors import RecordNotFoundError, RecordStoreError
from src.application.ports.record_store import Fields, RecordStorePort
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
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.record_codec import (
    decode_bill,
    decode_credit_card,
    decode_due_date,
    decode_financial_data,
    decode_installment,
    decode_installment_purchase,
    decode_investment,
    decode_recurring_income,
    decode_transaction,
    decode_user,
    encode_fields,
)

FINANCIAL_DATA = "/financial-data"
TRANSACTIONS = "/transactions"
BILLS = "/bills"
CREDIT_CARDS = "/credit-cards"
INVESTMENTS = "/investments"
RECURRING_INCOMES = "/recurring-incomes"
INSTALLMENT_PURCHASES = "/installments/purchases"
INSTALLMENTS = "/installments/installments"
DUE_DATES = "/due-dates"
USERS = "/users"


class HttpRecordStore(RecordStorePort):
    """RecordStorePort implementation talking JSON over HTTP.

    Every call is a single request without retries. Transport failures and
    non-success statuses raise RecordStoreError; a 404 on an id-addressed
    call raises RecordNotFoundError.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: requests.Session | None = None,
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            base_url: API root, e.g. ``http://localhost:3001/api``.
            timeout: Request timeout in seconds.
            session: Optional preconfigured requests session.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._logger = logger or get_app_logger()

    def _request(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None = None,
        params: Mapping[str, str] | None = None,
        record_id: str | None = None,
    ) -> Any:
        url = f"{self._base_url}{endpoint}"
        if record_id is not None:
            url = f"{url}/{record_id}"
        try:
            response = self._session.request(
                method,
                url,
                json=payload,
                params=params,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            self._logger.error(f"{method} {url} failed: {exc}")
            raise RecordStoreError(f"API Error: {exc}") from exc

        if response.status_code == 404 and record_id is not None:
            raise RecordNotFoundError(endpoint.strip("/"), record_id)
        if not response.ok:
            self._logger.error(
                f"{method} {url} returned {response.status_code}"
            )
            raise RecordStoreError(f"API Error: {response.reason}")
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            self._logger.error(f"{method} {url} returned invalid JSON: {exc}")
            raise RecordStoreError(
                f"API Error: invalid JSON response: {exc}"
            ) from exc

    def _list(self, endpoint: str, decoder: Callable, params=None) -> list:
        items = self._request("GET", endpoint, params=params) or []
        return [decoder(item) for item in items]

    def _create(self, endpoint: str, decoder: Callable, fields: Fields):
        return decoder(self._request("POST", endpoint, encode_fields(fields)))

    def _update(
        self,
        endpoint: str,
        decoder: Callable,
        record_id: str,
        updates: Fields,
    ):
        return decoder(
            self._request(
                "PUT", endpoint, encode_fields(updates), record_id=record_id
            )
        )

    def _delete(self, endpoint: str, record_id: str) -> None:
        self._request("DELETE", endpoint, record_id=record_id)

    def get_financial_data(self) -> FinancialData:
        return decode_financial_data(self._request("GET", FINANCIAL_DATA) or {})

    def list_users(self) -> list[User]:
        return self._list(USERS, decode_user)

    def list_transactions(self) -> list[Transaction]:
        return self._list(TRANSACTIONS, decode_transaction)

    def create_transaction(self, fields: Fields) -> Transaction:
        return self._create(TRANSACTIONS, decode_transaction, fields)

    def update_transaction(self, record_id: str, updates: Fields) -> Transaction:
        return self._update(TRANSACTIONS, decode_transaction, record_id, updates)

    def delete_transaction(self, record_id: str) -> None:
        self._delete(TRANSACTIONS, record_id)

    def list_bills(self) -> list[Bill]:
        return self._list(BILLS, decode_bill)

    def create_bill(self, fields: Fields) -> Bill:
        return self._create(BILLS, decode_bill, fields)

    def update_bill(self, record_id: str, updates: Fields) -> Bill:
        return self._update(BILLS, decode_bill, record_id, updates)

    def delete_bill(self, record_id: str) -> None:
        self._delete(BILLS, record_id)

    def list_credit_cards(self) -> list[CreditCard]:
        return self._list(CREDIT_CARDS, decode_credit_card)

    def create_credit_card(self, fields: Fields) -> CreditCard:
        return self._create(CREDIT_CARDS, decode_credit_card, fields)

    def update_credit_card(self, record_id: str, updates: Fields) -> CreditCard:
        return self._update(CREDIT_CARDS, decode_credit_card, record_id, updates)

    def delete_credit_card(self, record_id: str) -> None:
        self._delete(CREDIT_CARDS, record_id)

    def list_investments(self) -> list[Investment]:
        return self._list(INVESTMENTS, decode_investment)

    def get_investment(self, record_id: str) -> Investment:
        for investment in self.list_investments():
            if investment.id == record_id:
                return investment
        raise RecordNotFoundError("investments", record_id)

    def create_investment(self, fields: Fields) -> Investment:
        return self._create(INVESTMENTS, decode_investment, fields)

    def update_investment(self, record_id: str, updates: Fields) -> Investment:
        return self._update(INVESTMENTS, decode_investment, record_id, updates)

    def delete_investment(self, record_id: str) -> None:
        self._delete(INVESTMENTS, record_id)

    def list_recurring_incomes(self) -> list[RecurringIncome]:
        return self._list(RECURRING_INCOMES, decode_recurring_income)

    def create_recurring_income(self, fields: Fields) -> RecurringIncome:
        return self._create(RECURRING_INCOMES, decode_recurring_income, fields)

    def update_recurring_income(
        self,
        record_id: str,
        updates: Fields,
    ) -> RecurringIncome:
        return self._update(
            RECURRING_INCOMES, decode_recurring_income, record_id, updates
        )

    def delete_recurring_income(self, record_id: str) -> None:
        self._delete(RECURRING_INCOMES, record_id)

    def list_installment_purchases(self) -> list[InstallmentPurchase]:
        return self._list(INSTALLMENT_PURCHASES, decode_installment_purchase)

    def create_installment_purchase(
        self,
        fields: Fields,
    ) -> tuple[InstallmentPurchase, list[Installment]]:
        payload = self._request(
            "POST", INSTALLMENT_PURCHASES, encode_fields(fields)
        )
        purchase = decode_installment_purchase(payload["purchase"])
        installments = [
            decode_installment(item) for item in payload.get("installments", [])
        ]
        return purchase, installments

    def update_installment_purchase(
        self,
        record_id: str,
        updates: Fields,
    ) -> InstallmentPurchase:
        return self._update(
            INSTALLMENT_PURCHASES,
            decode_installment_purchase,
            record_id,
            updates,
        )

    def delete_installment_purchase(self, record_id: str) -> None:
        self._delete(INSTALLMENT_PURCHASES, record_id)

    def list_installments(
        self,
        purchase_id: str | None = None,
    ) -> list[Installment]:
        params = {"purchaseId": purchase_id} if purchase_id else None
        return self._list(INSTALLMENTS, decode_installment, params=params)

    def update_installment(self, record_id: str, updates: Fields) -> Installment:
        return self._update(INSTALLMENTS, decode_installment, record_id, updates)

    def list_due_dates(self) -> list[DueDate]:
        return self._list(DUE_DATES, decode_due_date)

    def create_due_date(self, fields: Fields) -> DueDate:
        return self._create(DUE_DATES, decode_due_date, fields)

    def update_due_date(self, record_id: str, updates: Fields) -> DueDate:
        return self._update(DUE_DATES, decode_due_date, record_id, updates)

    def delete_due_date(self, record_id: str) -> None:
        self._delete(DUE_DATES, record_id)


__all__ = ["HttpRecordStore"]
