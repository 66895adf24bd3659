"""Tests for the SQLAlchemy record store against in-memory SQLite."""

from datetime import date, datetime
from decimal import Decimal
from itertools import count
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from src.application.errors import RecordNotFoundError, RecordStoreError
from src.application.use_cases.dashboard_session import DashboardSession
from src.infrastructure.sql_record_store import SqlAlchemyRecordStore


class _DbPort:
    def __init__(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    def get_finance_engine(self):
        return self.engine


@pytest.fixture
def store() -> SqlAlchemyRecordStore:
    ids = count(1)
    record_store = SqlAlchemyRecordStore(
        _DbPort(),
        logger=MagicMock(),
        id_factory=lambda: f"id{next(ids)}",
        clock=lambda: datetime(2026, 10, 19, 8, 30),
    )
    record_store.ensure_schema()
    return record_store


def _bill_fields(name: str = "Luz") -> dict:
    return {
        "name": name,
        "due_date": date(2026, 10, 10),
        "amount": Decimal("150.25"),
        "status": "pending",
        "owner": "joint",
    }


def test_create_and_list_keep_insertion_order(store):
    first = store.create_bill(_bill_fields("Luz"))
    second = store.create_bill(_bill_fields("Água"))

    bills = store.list_bills()

    assert [bill.id for bill in bills] == [first.id, second.id]
    assert bills[0].amount == Decimal("150.25")
    assert bills[0].due_date == date(2026, 10, 10)


def test_update_merges_fields(store):
    bill = store.create_bill(_bill_fields())

    updated = store.update_bill(bill.id, {"status": "paid"})

    assert updated.status == "paid"
    assert updated.name == "Luz"
    assert store.list_bills()[0].status == "paid"


def test_update_missing_record_raises(store):
    with pytest.raises(RecordNotFoundError):
        store.update_bill("nope", {"status": "paid"})


def test_delete_removes_record(store):
    bill = store.create_bill(_bill_fields())

    store.delete_bill(bill.id)

    assert store.list_bills() == []
    with pytest.raises(RecordNotFoundError):
        store.delete_bill(bill.id)


def test_recurring_income_is_stamped_with_creation_time(store):
    income = store.create_recurring_income(
        {
            "description": "Salário",
            "amount": Decimal("3000"),
            "category": "Salário",
            "day_of_month": 5,
            "origin": "partner1",
            "enabled": True,
        }
    )

    assert income.created_at == datetime(2026, 10, 19, 8, 30)


def test_installment_purchase_creates_schedule_and_cascades(store):
    purchase, installments = store.create_installment_purchase(
        {
            "description": "Geladeira",
            "total_amount": Decimal("900"),
            "installments": 3,
            "installment_amount": Decimal("300"),
            "origin": "joint",
            "category": "Compras",
            "start_date": date(2026, 1, 31),
            "status": "active",
        }
    )

    assert len(installments) == 3
    stored = store.list_installments(purchase_id=purchase.id)
    assert [item.due_date for item in stored] == [
        date(2026, 1, 31),
        date(2026, 2, 28),
        date(2026, 3, 31),
    ]
    assert all(item.amount == Decimal("300") for item in stored)

    store.delete_installment_purchase(purchase.id)

    assert store.list_installment_purchases() == []
    assert store.list_installments() == []


def test_get_financial_data_collects_every_collection(store):
    store.create_bill(_bill_fields())
    store.create_investment(
        {
            "name": "CDB Banco",
            "type": "CDB",
            "amount": Decimal("1000"),
            "current_value": Decimal("1010"),
            "owner": "partner2",
        }
    )

    data = store.get_financial_data()

    assert len(data.bills) == 1
    assert data.investments[0].current_value == Decimal("1010")
    assert data.transactions == ()
    assert store.get_investment(data.investments[0].id).name == "CDB Banco"


def test_create_with_invalid_choice_is_rolled_back(store):
    with pytest.raises(ValueError, match="Invalid status"):
        store.create_bill({**_bill_fields(), "status": "overdue"})

    assert store.list_bills() == []
    assert store.get_financial_data().bills == ()


def test_update_with_invalid_choice_keeps_stored_record(store):
    bill = store.create_bill(_bill_fields())

    with pytest.raises(ValueError, match="Invalid status"):
        store.update_bill(bill.id, {"status": "unpaid"})

    assert store.list_bills()[0].status == "pending"
    assert store.get_financial_data().bills[0].status == "pending"


def test_decimal_amounts_are_stored_exactly(store):
    amount = Decimal("1012.1537412345678901")
    bill = store.create_bill({**_bill_fields(), "amount": amount})

    assert store.list_bills()[0].amount == amount

    store.update_bill(bill.id, {"amount": amount + Decimal("0.0000000000000001")})

    assert store.list_bills()[0].amount == Decimal("1012.1537412345678902")


def test_database_failure_raises_record_store_error():
    logger = MagicMock()
    unprepared = SqlAlchemyRecordStore(_DbPort(), logger=logger)

    with pytest.raises(RecordStoreError, match="Database Error"):
        unprepared.list_bills()
    with pytest.raises(RecordStoreError, match="Database Error"):
        unprepared.create_bill(_bill_fields())
    logger.error.assert_called()


def test_dashboard_session_reports_database_failure():
    session_logger = MagicMock()
    session = DashboardSession(
        SqlAlchemyRecordStore(_DbPort(), logger=MagicMock()),
        logger=session_logger,
    )

    with pytest.raises(RecordStoreError):
        session.refresh()

    assert session.snapshot is None
    session_logger.error.assert_called_once()
