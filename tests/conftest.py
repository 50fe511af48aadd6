from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002

from aliasdeck.adapters.memory import InMemoryKeyValueStore
from aliasdeck.adapters.sqlalchemy import shutdown, startup
from aliasdeck.catalogs.otp import OtpCodec
from aliasdeck.catalogs.workspace import WorkspaceCodec
from aliasdeck.domain.store import RecordStore

os.environ.setdefault("ALIASDECK_DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def blobs() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def otp_store(blobs: InMemoryKeyValueStore) -> RecordStore:
    return RecordStore(blobs, OtpCodec())


@pytest.fixture
def workspace_store(blobs: InMemoryKeyValueStore) -> RecordStore:
    return RecordStore(blobs, WorkspaceCodec())


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    startup(engine=engine, force=True)
    try:
        yield engine
    finally:
        shutdown()
