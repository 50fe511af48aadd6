from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine, inspect

from aliasdeck.adapters.sqlalchemy import (
    SqlAlchemyKeyValueStore,
    StartupError,
    is_started,
    session_factory,
    shutdown,
    startup,
)
from aliasdeck.catalogs.otp import OtpCodec
from aliasdeck.domain.model import ReferenceTarget
from aliasdeck.domain.ports import KeyValueStore
from aliasdeck.domain.store import RecordStore

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


def test_startup_creates_blob_table(sqlite_engine: Engine) -> None:
    assert is_started()
    assert "stored_blob" in inspect(sqlite_engine).get_table_names()


def test_second_startup_requires_force(sqlite_engine: Engine) -> None:
    with pytest.raises(StartupError):
        startup(engine=sqlite_engine)


def test_session_factory_requires_startup() -> None:
    shutdown()

    assert not is_started()
    with pytest.raises(StartupError):
        session_factory()


def test_missing_key_reads_as_none(sqlite_engine: Engine) -> None:
    _ = sqlite_engine
    store = SqlAlchemyKeyValueStore()

    assert isinstance(store, KeyValueStore)
    assert store.get("otp_pairs") is None


def test_set_inserts_then_overwrites(sqlite_engine: Engine) -> None:
    _ = sqlite_engine
    store = SqlAlchemyKeyValueStore()

    store.set("otp_pairs", "[]")
    store.set("otp_pairs", '[{"id": "1"}]')
    store.set("arc_shortcuts", "[]")

    assert store.get("otp_pairs") == '[{"id": "1"}]'
    assert store.get("arc_shortcuts") == "[]"


def test_values_are_visible_to_a_new_store_instance(sqlite_engine: Engine) -> None:
    _ = sqlite_engine
    SqlAlchemyKeyValueStore().set("otp_pairs", "[]")

    assert SqlAlchemyKeyValueStore().get("otp_pairs") == "[]"


def test_record_store_persists_through_database(sqlite_engine: Engine) -> None:
    _ = sqlite_engine
    writer = RecordStore(SqlAlchemyKeyValueStore(), OtpCodec())
    created = writer.add("Mail", ReferenceTarget("op://V/I/F"))

    reader = RecordStore(SqlAlchemyKeyValueStore(), OtpCodec())

    assert reader.load() == [created]


def test_forced_startup_rebinds_sessions_to_new_engine(sqlite_engine: Engine) -> None:
    SqlAlchemyKeyValueStore().set("otp_pairs", "[]")
    replacement = create_engine("sqlite+pysqlite:///:memory:", future=True)

    startup(engine=replacement, force=True)

    assert session_factory().kw["bind"] is replacement
    assert SqlAlchemyKeyValueStore().get("otp_pairs") is None
    assert sqlite_engine is not replacement
