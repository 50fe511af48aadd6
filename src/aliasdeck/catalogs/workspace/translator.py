"""Translate workspace shortcut payloads to and from alias records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from pydantic import ValidationError

from aliasdeck.domain.errors import InvalidRecordError
from aliasdeck.domain.model import AliasRecord, CatalogKind, ContextSelectorTarget, new_id

from .schema import ShortcutPayload, StoredShortcut

if TYPE_CHECKING:
    from collections.abc import Iterable

WORKSPACE_STORAGE_KEY: Final[str] = "arc_shortcuts"


def _target(record: AliasRecord) -> ContextSelectorTarget:
    if not isinstance(record.target, ContextSelectorTarget):
        raise TypeError(f"Workspace record {record.alias!r} must have a workspace target")
    return record.target


def _record_from_payload(payload: ShortcutPayload, record_id: str) -> AliasRecord:
    return AliasRecord(
        id=record_id,
        alias=payload.alias,
        target=ContextSelectorTarget(
            context_name=payload.workspace_name,
            index=payload.tab.selector.index,
        ),
        keywords=tuple(payload.keywords),
    )


@dataclass(frozen=True, slots=True)
class WorkspaceCodec:
    kind: CatalogKind = CatalogKind.WORKSPACE
    storage_key: str = WORKSPACE_STORAGE_KEY
    supports_line_format: bool = False

    def encode(self, record: AliasRecord) -> dict[str, Any]:
        return {"id": record.id, **self.to_export(record)}

    def decode(self, payload: object) -> AliasRecord | None:
        try:
            stored = StoredShortcut.model_validate(payload)
        except ValidationError:
            return None
        return _record_from_payload(stored, stored.id)

    def from_import(self, payload: object) -> AliasRecord | None:
        try:
            shortcut = ShortcutPayload.model_validate(payload)
        except ValidationError:
            return None
        return _record_from_payload(shortcut, new_id())

    def to_export(self, record: AliasRecord) -> dict[str, Any]:
        target = _target(record)
        return {
            "alias": record.alias,
            "workspaceName": target.context_name,
            "tab": {"selector": {"index": target.index}},
            "keywords": list(record.keywords),
        }

    def parse_line(self, line: str) -> AliasRecord | None:
        _ = line
        return None


def parse_tab_index(value: str | int) -> int:
    """Parse a 1-based tab index; zero, negatives and non-numbers are rejected."""

    if isinstance(value, bool):
        raise InvalidRecordError("Tab index must be a positive number")
    if isinstance(value, int):
        index = value
    else:
        digits = value.strip()
        # Plain ASCII digits only: no sign, underscores or other scripts.
        if not (digits.isascii() and digits.isdecimal()):
            raise InvalidRecordError("Tab index must be a positive number")
        index = int(digits, 10)
    if index < 1:
        raise InvalidRecordError("Tab index must be a positive number")
    return index


def parse_keywords(value: str | Iterable[str] | None) -> tuple[str, ...]:
    """Split comma-separated keywords, dropping blanks."""

    if value is None:
        return ()
    parts = value.split(",") if isinstance(value, str) else value
    return tuple(part.strip() for part in parts if part.strip())


def validate_workspace_input(
    alias: str,
    workspace_name: str,
    tab_index: str | int,
    keywords: str | Iterable[str] | None = None,
) -> tuple[str, ContextSelectorTarget, tuple[str, ...]]:
    """Validate form-style input for a new or edited shortcut."""

    alias = alias.strip()
    workspace_name = workspace_name.strip()
    if not alias or not workspace_name or not str(tab_index).strip():
        raise InvalidRecordError("Alias, workspace name, and tab index are required")
    target = ContextSelectorTarget(context_name=workspace_name, index=parse_tab_index(tab_index))
    return alias, target, parse_keywords(keywords)
