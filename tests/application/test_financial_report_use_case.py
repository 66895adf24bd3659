"""Tests for GetFinancialReportUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_financial_report import (
    GetFinancialReportUseCase,
)
from src.domain.models import FinancialData, Transaction


def _snapshot() -> FinancialData:
    return FinancialData(
        transactions=(
            Transaction(
                id="t1",
                description="Freela",
                amount=Decimal("400"),
                category="Freelancer",
                date=datetime(2026, 9, 1),
                origin="partner2",
                type="income",
            ),
        )
    )


def test_export_stamps_generation_time():
    store = MagicMock()
    store.get_financial_data.return_value = _snapshot()
    logger = MagicMock()
    use_case = GetFinancialReportUseCase(store, logger=logger)

    payload = use_case.export(now=datetime(2026, 10, 19, 12, 0))

    assert payload["generatedAt"] == "2026-10-19T12:00:00"
    assert payload["summary"]["totalIncome"] == 400.0
    assert payload["incomeByCategory"] == [{"name": "Freelancer", "value": 400.0}]
    assert payload["monthlyTrend"][-2]["income"] == 400.0
    logger.info.assert_called_once()
