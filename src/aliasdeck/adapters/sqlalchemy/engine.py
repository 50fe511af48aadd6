"""Engine and session lifecycle for the SQLAlchemy blob store."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from aliasdeck.config import get_database_config

from .mappings import create_all_tables, start_mappers

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the blob store is opened before ``startup()`` or started twice."""


_engine: Engine | None = None
_sessions: sessionmaker[Session] | None = None


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Bind the adapter to ``engine`` (or a new one) and make sure ``stored_blob`` exists."""

    global _engine, _sessions  # noqa: PLW0603
    if _engine is not None and not force:
        raise StartupError("Blob store already started. Pass force=True to rebind it.")
    bound = engine or create_engine(database_uri or get_database_config().uri, future=True)
    if _engine is not None and _engine is not bound:
        _engine.dispose()
    start_mappers()
    create_all_tables(bound)
    log.debug("Blob store bound to %s", bound.url)
    _engine = bound
    _sessions = sessionmaker(bind=bound, expire_on_commit=False)


def is_started() -> bool:
    return _engine is not None


def session_factory() -> sessionmaker[Session]:
    if _sessions is None:
        raise StartupError(
            "Blob store not started. Call aliasdeck.adapters.sqlalchemy.startup() first."
        )
    return _sessions


def shutdown() -> None:
    """Dispose the engine and forget it; tests call this between runs."""

    global _engine, _sessions  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _sessions = None
