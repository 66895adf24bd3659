"""Tests for the dashboard_cli adapter."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters import dashboard_cli
from src.domain.models import Bill, FinancialData


def test_main_prints_totals_and_calendar(monkeypatch, capsys):
    store = MagicMock()
    store.get_financial_data.return_value = FinancialData(
        bills=(
            Bill(
                id="b1",
                name="Internet",
                due_date=date.today().replace(day=7),
                amount=Decimal("120"),
                status="pending",
                owner="joint",
            ),
        )
    )
    monkeypatch.setattr(dashboard_cli, "build_record_store", lambda: store)
    monkeypatch.setattr(dashboard_cli, "get_app_logger", lambda: MagicMock())

    dashboard_cli.main()

    store.get_financial_data.assert_called_once()
    out = capsys.readouterr().out
    assert "Pendências: 120.00" in out
    assert "dia 07" in out
    assert "Internet" in out
