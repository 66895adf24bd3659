"""Tests for the export_report_cli adapter."""

from datetime import datetime
import json
from unittest.mock import MagicMock

from src.adapters import export_report_cli
from src.domain.models import FinancialData


def test_export_path_uses_date_stamp(tmp_path):
    path = export_report_cli.export_path(datetime(2026, 10, 19, 9), tmp_path)

    assert path == tmp_path / "relatorio-financeiro-2026-10-19.json"


def test_main_writes_report_file(monkeypatch, tmp_path, capsys):
    store = MagicMock()
    store.get_financial_data.return_value = FinancialData()
    monkeypatch.setattr(export_report_cli, "build_record_store", lambda: store)
    monkeypatch.setattr(export_report_cli, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(export_report_cli, "get_project_root", lambda: tmp_path)

    export_report_cli.main()

    files = list((tmp_path / "reports").glob("relatorio-financeiro-*.json"))
    assert len(files) == 1
    payload = json.loads(files[0].read_text(encoding="utf-8"))
    assert payload["summary"]["totalIncome"] == 0.0
    assert len(payload["monthlyTrend"]) == 12
    assert "Relatório exportado" in capsys.readouterr().out
