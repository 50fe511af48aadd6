"""Domain model for alias catalogs."""

from __future__ import annotations

from .base import new_id
from .enums import CatalogKind
from .record import AliasRecord, ContextSelectorTarget, RecordTarget, ReferenceTarget

__all__ = [
    "AliasRecord",
    "CatalogKind",
    "ContextSelectorTarget",
    "RecordTarget",
    "ReferenceTarget",
    "new_id",
]
