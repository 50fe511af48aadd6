"""Alias records and their target variants.

Both catalogs share one record shape. The ``target`` is a tagged union:

- ``ReferenceTarget``: an opaque external reference (``op://...``)
- ``ContextSelectorTarget``: a workspace name plus a 1-based tab index
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TypeAlias

from .base import new_id


@dataclass(frozen=True, slots=True)
class ReferenceTarget:
    reference: str

    def normalized(self) -> ReferenceTarget:
        return ReferenceTarget(reference=self.reference.strip())

    def describe(self) -> str:
        return self.reference


@dataclass(frozen=True, slots=True)
class ContextSelectorTarget:
    context_name: str
    index: int

    def normalized(self) -> ContextSelectorTarget:
        return ContextSelectorTarget(context_name=self.context_name.strip(), index=self.index)

    def describe(self) -> str:
        return f"{self.context_name} → Tab #{self.index}"


RecordTarget: TypeAlias = ReferenceTarget | ContextSelectorTarget


@dataclass(frozen=True, slots=True, kw_only=True)
class AliasRecord:
    """A user-facing alias bound to a target."""

    alias: str
    target: RecordTarget
    keywords: tuple[str, ...] = ()
    id: str = field(default_factory=new_id)

    @property
    def label(self) -> str:
        """The OTP catalog calls the alias a label."""
        return self.alias

    def normalized(self) -> AliasRecord:
        """Return a copy with trimmed text fields and a guaranteed id.

        Normalizing twice yields the same record.
        """
        keywords = tuple(kw.strip() for kw in self.keywords if kw.strip())
        return replace(
            self,
            id=self.id or new_id(),
            alias=self.alias.strip(),
            target=self.target.normalized(),
            keywords=keywords,
        )

    def with_id(self, record_id: str) -> AliasRecord:
        return replace(self, id=record_id)
