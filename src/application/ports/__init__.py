"""Application ports package."""

from .database import DatabaseEnginePort
from .record_store import Fields, RecordStorePort

__all__ = [
    "DatabaseEnginePort",
    "Fields",
    "RecordStorePort",
]
