"""Seed/import text parsing.

Text is tried as a JSON array first. For catalogs with a line form the parser
then falls back to ``<label> = <reference>`` lines. Malformed input never raises.
"""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

from aliasdeck.domain.merging import dedupe

if TYPE_CHECKING:
    from aliasdeck.domain.model import AliasRecord
    from aliasdeck.domain.ports import CatalogCodec

log = getLogger(__name__)


def parse_import_text(text: str, codec: CatalogCodec) -> list[AliasRecord]:
    """Turn free-form text into validated records, each with a fresh id."""

    trimmed = text.strip()
    if not trimmed:
        return []

    records = _parse_json_array(trimmed, codec)
    if records:
        return records

    # An array with no valid element counts as a failed attempt.
    if not codec.supports_line_format:
        return []
    return dedupe(_parse_lines(trimmed, codec))


def _parse_json_array(text: str, codec: CatalogCodec) -> list[AliasRecord]:
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        log.debug("Import text is not usable JSON (%s), trying next strategy", exc)
        return []
    if not isinstance(payload, list):
        log.debug("Import JSON is a %s, expected an array", type(payload).__name__)
        return []

    records: list[AliasRecord] = []
    for element in payload:
        record = codec.from_import(element)
        if record is None:
            log.debug("Skipping invalid %s import element: %r", codec.kind, element)
            continue
        records.append(record)
    return records


def _parse_lines(text: str, codec: CatalogCodec) -> list[AliasRecord]:
    records: list[AliasRecord] = []
    for line in text.splitlines():
        record = codec.parse_line(line)
        if record is not None:
            records.append(record)
    return records
