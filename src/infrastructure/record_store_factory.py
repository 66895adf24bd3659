"""Factory helpers to select the record store backend."""

import requests

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import RecordStorePort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.http_record_store import HttpRecordStore
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import FinanceSettings
from src.infrastructure.sql_record_store import SqlAlchemyRecordStore


def create_record_store(
    settings: FinanceSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
    logger=None,
    session: requests.Session | None = None,
) -> RecordStorePort:
    """Return a record store implementation based on configuration.

    Args:
        settings: Optional settings; read from the environment when omitted.
        db_port: Port providing the finance engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        session: Optional requests session (HTTP backend).

    Returns:
        RecordStorePort: Concrete record store implementation.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or FinanceSettings.from_env()
    backend = resolved_settings.backend

    if backend == "http":
        return HttpRecordStore(
            resolved_settings.api_url,
            timeout=resolved_settings.api_timeout,
            session=session,
            logger=resolved_logger,
        )

    if backend == "sqlalchemy":
        store = SqlAlchemyRecordStore(
            db_port or SqlAlchemyDatabaseEngineAdapter(),
            logger=resolved_logger,
        )
        store.ensure_schema()
        return store

    raise ValueError(
        "Unsupported record store backend: "
        f"{backend}. Expected http or sqlalchemy."
    )


__all__ = ["create_record_store"]
