"""Database ports for the finance record store.

This module defines the application-layer protocol for accessing the
database engine backing the SQL record store. Infrastructure
implementations are expected to provide concrete adapters.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the finance database."""

    def get_finance_engine(self) -> Engine:
        """Get the engine for the finance database.

        Returns:
            Engine: SQLAlchemy engine connected to the finance records.
        """


__all__ = ["DatabaseEnginePort"]
