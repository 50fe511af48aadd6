"""Merge, dedupe and export of alias record collections.

Identity across collections is the case-insensitive alias; record ids are kept
for aliases that already exist and minted for new ones.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from aliasdeck.domain.model import new_id

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from aliasdeck.domain.model import AliasRecord
    from aliasdeck.domain.ports import CatalogCodec


def alias_key(alias: str) -> str:
    return alias.lower()


@dataclass(slots=True, frozen=True)
class MergeSummary:
    updated: int
    added: int


def merge(existing: Iterable[AliasRecord], incoming: Iterable[AliasRecord]) -> list[AliasRecord]:
    """Combine ``incoming`` into ``existing``.

    Matched aliases keep their id and spelling and adopt the incoming target and
    keywords. Unmatched incoming records are appended with a fresh id. Existing
    entries keep their original order, new ones follow in incoming order.
    """

    merged, _ = merge_with_summary(existing, incoming)
    return merged


def merge_with_summary(
    existing: Iterable[AliasRecord], incoming: Iterable[AliasRecord]
) -> tuple[list[AliasRecord], MergeSummary]:
    by_key: dict[str, AliasRecord] = {}
    for record in existing:
        by_key[alias_key(record.alias)] = record

    updated = 0
    added = 0
    for record in incoming:
        key = alias_key(record.alias)
        current = by_key.get(key)
        if current is not None:
            by_key[key] = replace(current, target=record.target, keywords=record.keywords)
            updated += 1
        else:
            by_key[key] = record.with_id(new_id())
            added += 1

    return list(by_key.values()), MergeSummary(updated=updated, added=added)


def dedupe(records: Iterable[AliasRecord]) -> list[AliasRecord]:
    """Keep the first record per case-insensitive alias, preserving order."""

    seen: set[str] = set()
    survivors: list[AliasRecord] = []
    for record in records:
        key = alias_key(record.alias)
        if key in seen:
            continue
        seen.add(key)
        survivors.append(record)
    return survivors


def export_records(records: Sequence[AliasRecord], codec: CatalogCodec) -> str:
    """Pretty-printed JSON of the catalog's minimal projection (no ids)."""

    minimal = [codec.to_export(record) for record in records]
    return json.dumps(minimal, indent=2, ensure_ascii=False)
