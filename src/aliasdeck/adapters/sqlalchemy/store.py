"""Key-value blob store backed by SQLAlchemy sessions."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from .engine import session_factory as current_session_factory
from .mappings import StoredBlob

if TYPE_CHECKING:
    from sqlalchemy.orm import Session, sessionmaker


class SqlAlchemyKeyValueStore:
    """Each ``get``/``set`` runs in its own short transaction."""

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        self.session_factory = session_factory or current_session_factory()

    def get(self, key: str) -> str | None:
        with self.session_factory() as session:
            blob = session.get(StoredBlob, key)
            return None if blob is None else blob.value

    def set(self, key: str, value: str) -> None:
        now = datetime.now(UTC)
        with self.session_factory.begin() as session:
            blob = session.get(StoredBlob, key)
            if blob is None:
                session.add(StoredBlob(key=key, value=value, updated_at=now))
            else:
                blob.value = value
                blob.updated_at = now
