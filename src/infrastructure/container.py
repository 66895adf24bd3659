"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.dashboard_session import DashboardSession
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.record_store_factory import create_record_store
from src.infrastructure.settings import FinanceSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_record_store(
    db_port: DatabaseEnginePort | None = None,
) -> RecordStorePort:
    """Return the configured record store."""
    settings = FinanceSettings.from_env()
    resolved_db = db_port
    if settings.backend == "sqlalchemy" and resolved_db is None:
        resolved_db = build_database_adapter()
    return create_record_store(
        settings,
        db_port=resolved_db,
        logger=get_app_logger(),
    )


def build_dashboard_session(
    store: RecordStorePort | None = None,
) -> DashboardSession:
    """Return a dashboard session bound to the configured store."""
    return DashboardSession(store or build_record_store())


__all__ = [
    "build_database_adapter",
    "build_record_store",
    "build_dashboard_session",
]
