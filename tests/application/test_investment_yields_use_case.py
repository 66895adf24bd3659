"""Tests for the investment yield use cases."""

from dataclasses import replace
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.errors import RecordNotFoundError
from src.application.use_cases.investment_yields import (
    ApplyInvestmentYieldUseCase,
    GetInvestmentYieldsUseCase,
)
from src.domain.models import FinancialData, Investment

POUPANCA = Investment(
    id="i1",
    name="Poupança Casa",
    type="Poupança",
    amount=Decimal("1000"),
    current_value=Decimal("1000"),
    owner="joint",
)


def test_get_yields_summarizes_portfolio():
    store = MagicMock()
    store.get_financial_data.return_value = FinancialData(investments=(POUPANCA,))

    summary = GetInvestmentYieldsUseCase(store, logger=MagicMock()).execute()

    assert summary.total_invested == Decimal("1000")
    assert summary.yields[0].monthly == Decimal("5.000")
    assert summary.yields[0].annual == Decimal("60.000")


def test_get_yields_filters_by_owner_and_type():
    cdb = Investment(
        id="i2",
        name="CDB Banco",
        type="CDB",
        amount=Decimal("2000"),
        current_value=Decimal("2100"),
        owner="partner1",
    )
    data = FinancialData(investments=(POUPANCA, cdb))
    use_case = GetInvestmentYieldsUseCase(MagicMock(), logger=MagicMock())

    by_owner = use_case.execute(data, owner="partner1")
    by_type = use_case.execute(data, investment_type="Poupança")
    everything = use_case.execute(data)

    assert [item.investment_id for item in by_owner.yields] == ["i2"]
    assert by_owner.total_invested == Decimal("2000")
    assert [item.investment_id for item in by_type.yields] == ["i1"]
    assert everything.total_invested == Decimal("3000")


def test_apply_yield_replaces_current_value():
    store = MagicMock()
    store.get_investment.return_value = POUPANCA
    store.update_investment.side_effect = lambda record_id, updates: replace(
        POUPANCA, current_value=updates["current_value"]
    )

    updated = ApplyInvestmentYieldUseCase(store, logger=MagicMock()).execute("i1")

    store.update_investment.assert_called_once_with(
        "i1", {"current_value": Decimal("1005.000")}
    )
    assert updated.current_value == Decimal("1005.000")


def test_apply_yield_propagates_missing_investment():
    store = MagicMock()
    store.get_investment.side_effect = RecordNotFoundError("investments", "x")

    with pytest.raises(RecordNotFoundError):
        ApplyInvestmentYieldUseCase(store, logger=MagicMock()).execute("x")
    store.update_investment.assert_not_called()
