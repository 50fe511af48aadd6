"""SQLAlchemy adapter package for aliasdeck."""

from __future__ import annotations

from .engine import (
    StartupError,
    is_started,
    session_factory,
    shutdown,
    startup,
)
from .mappings import StoredBlob, blob_table, create_all_tables, mapper_registry, start_mappers
from .store import SqlAlchemyKeyValueStore

__all__ = [
    "SqlAlchemyKeyValueStore",
    "StartupError",
    "StoredBlob",
    "blob_table",
    "create_all_tables",
    "is_started",
    "mapper_registry",
    "session_factory",
    "shutdown",
    "start_mappers",
    "startup",
]
