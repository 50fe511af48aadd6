"""Record store: typed CRUD over one catalog persisted as a single JSON blob.

Every mutating operation is a full load-modify-save cycle. There is no
optimistic concurrency check, so overlapping writers race and the last ``save``
wins.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from aliasdeck.domain.import_parser import parse_import_text
from aliasdeck.domain.merging import export_records, merge_with_summary
from aliasdeck.domain.model import AliasRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from aliasdeck.domain.model import RecordTarget
    from aliasdeck.domain.ports import CatalogCodec, KeyValueStore

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ImportSummary:
    """Outcome of an import; ``incoming == 0`` means nothing was written."""

    incoming: int
    added: int = 0
    updated: int = 0
    total: int = 0

    @property
    def imported(self) -> bool:
        return self.incoming > 0


class RecordStore:
    """Catalog-agnostic store; the codec supplies validation and payload shape."""

    def __init__(
        self,
        blobs: KeyValueStore,
        codec: CatalogCodec,
        *,
        seed_text: str | None = None,
    ) -> None:
        self._blobs = blobs
        self._codec = codec
        self._seed_text = seed_text

    @property
    def codec(self) -> CatalogCodec:
        return self._codec

    def load(self) -> list[AliasRecord]:
        """Return the persisted collection, seeding it once when none exists yet."""

        raw = self._blobs.get(self._codec.storage_key)
        if raw:
            return self._decode(raw)

        seeded = self._seed_records()
        if seeded:
            log.info("Seeded %s catalog with %d record(s)", self._codec.kind, len(seeded))
            self.save(seeded)
            return [record.normalized() for record in seeded]
        return []

    def save(self, records: Iterable[AliasRecord]) -> None:
        """Normalize and persist ``records``, replacing the stored collection."""

        normalized = [record.normalized() for record in records]
        payload = [self._codec.encode(record) for record in normalized]
        self._blobs.set(self._codec.storage_key, json.dumps(payload, ensure_ascii=False))

    def add(
        self,
        alias: str,
        target: RecordTarget,
        *,
        keywords: Sequence[str] = (),
    ) -> AliasRecord:
        """Append a new record with a fresh id.

        No alias-uniqueness check happens here; only merge/import dedupe by alias.
        """

        records = self.load()
        record = AliasRecord(alias=alias, target=target, keywords=tuple(keywords)).normalized()
        records.append(record)
        self.save(records)
        return record

    def update(self, record: AliasRecord) -> bool:
        """Replace the record with the same id. Unknown ids are ignored."""

        records = self.load()
        for position, current in enumerate(records):
            if current.id == record.id:
                records[position] = record.normalized()
                self.save(records)
                return True
        log.debug("No %s record with id %s to update", self._codec.kind, record.id)
        return False

    def delete(self, record_id: str) -> bool:
        records = self.load()
        remaining = [record for record in records if record.id != record_id]
        self.save(remaining)
        return len(remaining) != len(records)

    def import_text(self, text: str) -> ImportSummary:
        """Parse ``text`` and merge it into the stored collection by alias."""

        incoming = parse_import_text(text, self._codec)
        if not incoming:
            return ImportSummary(incoming=0)

        merged, summary = merge_with_summary(self.load(), incoming)
        self.save(merged)
        return ImportSummary(
            incoming=len(incoming),
            added=summary.added,
            updated=summary.updated,
            total=len(merged),
        )

    def export_text(self) -> str:
        return export_records(self.load(), self._codec)

    def _decode(self, raw: str) -> list[AliasRecord]:
        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, RecursionError):
            log.warning("Stored %s catalog is not valid JSON; treating as empty", self._codec.kind)
            return []
        if not isinstance(payload, list):
            log.warning("Stored %s catalog is not a JSON array; treating as empty", self._codec.kind)
            return []

        records: list[AliasRecord] = []
        for element in payload:
            record = self._codec.decode(element)
            if record is not None:
                records.append(record)
        return records

    def _seed_records(self) -> list[AliasRecord]:
        seed = (self._seed_text or "").strip()
        if not seed:
            return []
        return parse_import_text(seed, self._codec)
