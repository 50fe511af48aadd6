"""SQLAlchemy mapping metadata for persisted catalog blobs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, Dialect, String, Table, Text, TypeDecorator, orm
from sqlalchemy.orm import configure_mappers

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


@dataclass(eq=False, kw_only=True)
class StoredBlob:
    """One opaque value per key; the catalogs keep a JSON array here."""

    key: str
    value: str
    updated_at: datetime | None = None


mapper_registry = orm.registry()

blob_table = Table(
    "stored_blob",
    mapper_registry.metadata,
    Column("key", String(128), primary_key=True),
    Column("value", Text, nullable=False),
    Column("updated_at", UTCDateTime(), nullable=True),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for persisted blobs."""

    log.debug("Starting SQLAlchemy mappers")
    mapper_registry.map_imperatively(StoredBlob, blob_table)
    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.debug("Creating all tables")
    mapper_registry.metadata.create_all(engine)
