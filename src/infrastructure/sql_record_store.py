"""SQLAlchemy-backed record store keeping API payloads in one table."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
import json
from typing import Any
from uuid import uuid4

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.errors import RecordNotFoundError, RecordStoreError
from src.application.ports.database import DatabaseEnginePort
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
from src.domain.services.installments import build_installment_schedule
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.record_codec import (
    SNAPSHOT_COLLECTIONS,
    decode_bill,
    decode_credit_card,
    decode_due_date,
    decode_installment,
    decode_installment_purchase,
    decode_investment,
    decode_recurring_income,
    decode_transaction,
    decode_user,
    encode_fields,
    encode_record,
)

# Snapshot key -> collection name used by the API paths.
COLLECTIONS = {
    "users": "users",
    "transactions": "transactions",
    "bills": "bills",
    "creditCards": "credit-cards",
    "investments": "investments",
    "recurringIncomes": "recurring-incomes",
    "installmentPurchases": "installment-purchases",
    "installments": "installments",
    "dueDates": "due-dates",
}

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS records (
    collection VARCHAR(64) NOT NULL,
    id VARCHAR(64) NOT NULL,
    position INTEGER NOT NULL,
    payload TEXT NOT NULL,
    PRIMARY KEY (collection, id)
)
"""


class SqlAlchemyRecordStore(RecordStorePort):
    """RecordStorePort implementation persisting JSON payloads via SQL.

    Records keep the camelCase payload shape of the REST API so both
    backends decode through the same codec.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        logger=None,
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Generates ids for new records.
            clock: Returns the creation timestamp of recurring incomes.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory or (lambda: uuid4().hex)
        self._clock = clock or datetime.now

    @contextmanager
    def _connection(self, write: bool = False) -> Iterator:
        """Yield a connection, mapping database failures to RecordStoreError.

        Args:
            write: Open a transaction committed when the block succeeds.
                Any exception raised inside the block rolls it back.

        Raises:
            RecordStoreError: If the database rejects the operation.
        """
        engine = self._db_port.get_finance_engine()
        try:
            with (engine.begin() if write else engine.connect()) as conn:
                yield conn
        except SQLAlchemyError as exc:
            self._logger.error(f"Database operation failed: {exc}")
            raise RecordStoreError(f"Database Error: {exc}") from exc

    def ensure_schema(self) -> None:
        """Create the records table when missing."""
        with self._connection(write=True) as conn:
            conn.execute(text(_CREATE_TABLE))

    def _fetch_payloads(self, collection: str) -> list[dict[str, Any]]:
        query = text(
            """
            SELECT payload
            FROM records
            WHERE collection = :collection
            ORDER BY position
            """
        )
        with self._connection() as conn:
            rows = conn.execute(query, {"collection": collection}).all()
        return [json.loads(row.payload) for row in rows]

    @staticmethod
    def _dump(payload: dict[str, Any]) -> str:
        return json.dumps(payload, ensure_ascii=False)

    def _insert(
        self,
        conn,
        collection: str,
        payload: dict[str, Any],
        record_id: str | None = None,
    ) -> dict[str, Any]:
        record_id = record_id or self._id_factory()
        stored = {**payload, "id": record_id}
        position = conn.execute(
            text(
                """
                SELECT COALESCE(MAX(position), 0) + 1 AS next_position
                FROM records
                WHERE collection = :collection
                """
            ),
            {"collection": collection},
        ).first()
        conn.execute(
            text(
                """
                INSERT INTO records (collection, id, position, payload)
                VALUES (:collection, :id, :position, :payload)
                """
            ),
            {
                "collection": collection,
                "id": record_id,
                "position": position.next_position,
                "payload": self._dump(stored),
            },
        )
        return stored

    def _create(self, collection: str, decoder: Callable, fields: Fields):
        payload = encode_fields(fields, decimals_as_text=True)
        payload.pop("id", None)
        with self._connection(write=True) as conn:
            stored = self._insert(conn, collection, payload)
            record = decoder(stored)
        self._logger.info(f"Created {collection} record {stored['id']}")
        return record

    def _update(
        self,
        collection: str,
        decoder: Callable,
        record_id: str,
        updates: Fields,
    ):
        changes = encode_fields(updates, decimals_as_text=True)
        changes.pop("id", None)
        with self._connection(write=True) as conn:
            row = conn.execute(
                text(
                    """
                    SELECT payload
                    FROM records
                    WHERE collection = :collection AND id = :id
                    """
                ),
                {"collection": collection, "id": record_id},
            ).first()
            if row is None:
                raise RecordNotFoundError(collection, record_id)
            stored = {**json.loads(row.payload), **changes}
            record = decoder(stored)
            conn.execute(
                text(
                    """
                    UPDATE records
                    SET payload = :payload
                    WHERE collection = :collection AND id = :id
                    """
                ),
                {
                    "collection": collection,
                    "id": record_id,
                    "payload": self._dump(stored),
                },
            )
        return record

    def _delete_ids(self, conn, collection: str, record_ids: list[str]) -> int:
        deleted = 0
        for record_id in record_ids:
            result = conn.execute(
                text(
                    """
                    DELETE FROM records
                    WHERE collection = :collection AND id = :id
                    """
                ),
                {"collection": collection, "id": record_id},
            )
            deleted += result.rowcount
        return deleted

    def _delete(self, collection: str, record_id: str) -> None:
        with self._connection(write=True) as conn:
            if not self._delete_ids(conn, collection, [record_id]):
                raise RecordNotFoundError(collection, record_id)

    def get_financial_data(self) -> FinancialData:
        collections = {}
        for key, (field_name, decoder) in SNAPSHOT_COLLECTIONS.items():
            payloads = self._fetch_payloads(COLLECTIONS[key])
            collections[field_name] = tuple(decoder(item) for item in payloads)
        return FinancialData(**collections)

    def list_users(self) -> list[User]:
        return [decode_user(item) for item in self._fetch_payloads("users")]

    def list_transactions(self) -> list[Transaction]:
        return [
            decode_transaction(item)
            for item in self._fetch_payloads("transactions")
        ]

    def create_transaction(self, fields: Fields) -> Transaction:
        return self._create("transactions", decode_transaction, fields)

    def update_transaction(self, record_id: str, updates: Fields) -> Transaction:
        return self._update("transactions", decode_transaction, record_id, updates)

    def delete_transaction(self, record_id: str) -> None:
        self._delete("transactions", record_id)

    def list_bills(self) -> list[Bill]:
        return [decode_bill(item) for item in self._fetch_payloads("bills")]

    def create_bill(self, fields: Fields) -> Bill:
        return self._create("bills", decode_bill, fields)

    def update_bill(self, record_id: str, updates: Fields) -> Bill:
        return self._update("bills", decode_bill, record_id, updates)

    def delete_bill(self, record_id: str) -> None:
        self._delete("bills", record_id)

    def list_credit_cards(self) -> list[CreditCard]:
        return [
            decode_credit_card(item)
            for item in self._fetch_payloads("credit-cards")
        ]

    def create_credit_card(self, fields: Fields) -> CreditCard:
        return self._create("credit-cards", decode_credit_card, fields)

    def update_credit_card(self, record_id: str, updates: Fields) -> CreditCard:
        return self._update("credit-cards", decode_credit_card, record_id, updates)

    def delete_credit_card(self, record_id: str) -> None:
        self._delete("credit-cards", record_id)

    def list_investments(self) -> list[Investment]:
        return [
            decode_investment(item)
            for item in self._fetch_payloads("investments")
        ]

    def get_investment(self, record_id: str) -> Investment:
        for investment in self.list_investments():
            if investment.id == record_id:
                return investment
        raise RecordNotFoundError("investments", record_id)

    def create_investment(self, fields: Fields) -> Investment:
        return self._create("investments", decode_investment, fields)

    def update_investment(self, record_id: str, updates: Fields) -> Investment:
        return self._update("investments", decode_investment, record_id, updates)

    def delete_investment(self, record_id: str) -> None:
        self._delete("investments", record_id)

    def list_recurring_incomes(self) -> list[RecurringIncome]:
        return [
            decode_recurring_income(item)
            for item in self._fetch_payloads("recurring-incomes")
        ]

    def create_recurring_income(self, fields: Fields) -> RecurringIncome:
        stamped = {**fields, "created_at": self._clock()}
        return self._create("recurring-incomes", decode_recurring_income, stamped)

    def update_recurring_income(
        self,
        record_id: str,
        updates: Fields,
    ) -> RecurringIncome:
        return self._update(
            "recurring-incomes", decode_recurring_income, record_id, updates
        )

    def delete_recurring_income(self, record_id: str) -> None:
        self._delete("recurring-incomes", record_id)

    def list_installment_purchases(self) -> list[InstallmentPurchase]:
        return [
            decode_installment_purchase(item)
            for item in self._fetch_payloads("installment-purchases")
        ]

    def create_installment_purchase(
        self,
        fields: Fields,
    ) -> tuple[InstallmentPurchase, list[Installment]]:
        """Store a purchase and its installment schedule atomically."""
        payload = encode_fields(fields, decimals_as_text=True)
        payload.pop("id", None)
        with self._connection(write=True) as conn:
            purchase = decode_installment_purchase(
                self._insert(conn, "installment-purchases", payload)
            )
            installments = build_installment_schedule(
                purchase,
                id_factory=lambda _index: self._id_factory(),
            )
            for installment in installments:
                self._insert(
                    conn,
                    "installments",
                    encode_record(installment, decimals_as_text=True),
                    record_id=installment.id,
                )
        self._logger.info(
            f"Created installment purchase {purchase.id} "
            f"with {len(installments)} installments"
        )
        return purchase, installments

    def update_installment_purchase(
        self,
        record_id: str,
        updates: Fields,
    ) -> InstallmentPurchase:
        return self._update(
            "installment-purchases",
            decode_installment_purchase,
            record_id,
            updates,
        )

    def delete_installment_purchase(self, record_id: str) -> None:
        owned = [
            installment.id
            for installment in self.list_installments(purchase_id=record_id)
        ]
        with self._connection(write=True) as conn:
            if not self._delete_ids(conn, "installment-purchases", [record_id]):
                raise RecordNotFoundError("installment-purchases", record_id)
            self._delete_ids(conn, "installments", owned)

    def list_installments(
        self,
        purchase_id: str | None = None,
    ) -> list[Installment]:
        installments = [
            decode_installment(item)
            for item in self._fetch_payloads("installments")
        ]
        if purchase_id is None:
            return installments
        return [item for item in installments if item.purchase_id == purchase_id]

    def update_installment(self, record_id: str, updates: Fields) -> Installment:
        return self._update("installments", decode_installment, record_id, updates)

    def list_due_dates(self) -> list[DueDate]:
        return [
            decode_due_date(item) for item in self._fetch_payloads("due-dates")
        ]

    def create_due_date(self, fields: Fields) -> DueDate:
        return self._create("due-dates", decode_due_date, fields)

    def update_due_date(self, record_id: str, updates: Fields) -> DueDate:
        return self._update("due-dates", decode_due_date, record_id, updates)

    def delete_due_date(self, record_id: str) -> None:
        self._delete("due-dates", record_id)


__all__ = ["SqlAlchemyRecordStore", "COLLECTIONS"]
