"""Alias lookup and display search."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from aliasdeck.domain.model import ContextSelectorTarget

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from aliasdeck.domain.model import AliasRecord


def _normalize(alias: str) -> str:
    return alias.strip().lower()


class ResolutionStatus(StrEnum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    EMPTY = "empty"


@dataclass(slots=True, frozen=True, kw_only=True)
class Resolution:
    """Result of an alias lookup.

    ``EMPTY`` (no records at all) and ``NOT_FOUND`` are both non-fatal but call
    for different user-facing messages.
    """

    query: str
    status: ResolutionStatus
    record: AliasRecord | None = None

    @property
    def found(self) -> bool:
        return self.status is ResolutionStatus.FOUND


def find_by_alias(records: Iterable[AliasRecord], alias: str) -> AliasRecord | None:
    """Return the first record whose trimmed, lower-cased alias equals ``alias``."""

    wanted = _normalize(alias)
    for record in records:
        if _normalize(record.alias) == wanted:
            return record
    return None


def resolve(records: Sequence[AliasRecord], alias: str) -> Resolution:
    if not records:
        return Resolution(query=alias, status=ResolutionStatus.EMPTY)
    record = find_by_alias(records, alias)
    if record is None:
        return Resolution(query=alias, status=ResolutionStatus.NOT_FOUND)
    return Resolution(query=alias, status=ResolutionStatus.FOUND, record=record)


def _search_terms(record: AliasRecord) -> list[str]:
    terms = [record.alias, *record.keywords]
    target = record.target
    if isinstance(target, ContextSelectorTarget):
        terms.extend((target.context_name, str(target.index)))
    else:
        terms.append(target.reference)
    return terms


def filter_records(records: Iterable[AliasRecord], query: str) -> list[AliasRecord]:
    """Case-insensitive substring search over alias, target and keywords."""

    needle = query.strip().lower()
    if not needle:
        return list(records)
    return [
        record
        for record in records
        if any(needle in term.lower() for term in _search_terms(record))
    ]


def sort_for_display(records: Iterable[AliasRecord]) -> list[AliasRecord]:
    """Order workspace records by workspace name then tab index.

    Records without a workspace target keep their stored order after them.
    """

    workspace: list[tuple[AliasRecord, ContextSelectorTarget]] = []
    others: list[AliasRecord] = []
    for record in records:
        if isinstance(record.target, ContextSelectorTarget):
            workspace.append((record, record.target))
        else:
            others.append(record)
    workspace.sort(key=lambda item: (item[1].context_name.casefold(), item[1].index))
    return [record for record, _ in workspace] + others
