"""Port describing how one catalog maps records to JSON payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from aliasdeck.domain.model import AliasRecord, CatalogKind


@runtime_checkable
class CatalogCodec(Protocol):
    """Catalog-specific validation and (de)serialization plugged into the generic store."""

    kind: CatalogKind
    storage_key: str
    supports_line_format: bool

    def encode(self, record: AliasRecord) -> dict[str, Any]:
        """Full persisted form, including ``id``."""
        ...

    def decode(self, payload: object) -> AliasRecord | None:
        """Rebuild a persisted element, or ``None`` when it is incomplete."""
        ...

    def from_import(self, payload: object) -> AliasRecord | None:
        """Validate one imported element and give it a fresh id."""
        ...

    def to_export(self, record: AliasRecord) -> dict[str, Any]:
        """Minimal re-importable projection without ``id``."""
        ...

    def parse_line(self, line: str) -> AliasRecord | None:
        """Parse one ``<label> = <reference>`` line; ``None`` when it does not match."""
        ...
