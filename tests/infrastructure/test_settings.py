"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import FinanceSettings


def _isolate(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    for name in ("FINANCE_BACKEND", "FINANCE_API_URL", "FINANCE_API_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return logger


def test_from_env_defaults(monkeypatch) -> None:
    """Without variables the HTTP backend and local API are selected."""
    _isolate(monkeypatch)

    settings = FinanceSettings.from_env()

    assert settings.backend == "http"
    assert settings.api_url == "http://localhost:3001/api"
    assert settings.api_timeout == 10.0


def test_from_env_reads_variables(monkeypatch) -> None:
    _isolate(monkeypatch)
    monkeypatch.setenv("FINANCE_BACKEND", " SQLAlchemy ")
    monkeypatch.setenv("FINANCE_API_URL", "https://finance.example/api")
    monkeypatch.setenv("FINANCE_API_TIMEOUT", "2.5")

    settings = FinanceSettings.from_env()

    assert settings.backend == "sqlalchemy"
    assert settings.api_url == "https://finance.example/api"
    assert settings.api_timeout == 2.5


def test_invalid_timeout_falls_back_with_warning(monkeypatch) -> None:
    logger = _isolate(monkeypatch)
    monkeypatch.setenv("FINANCE_API_TIMEOUT", "soon")

    settings = FinanceSettings.from_env()

    assert settings.api_timeout == 10.0
    logger.warning.assert_called_once()
