"""Translate OTP payloads to and from alias records."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Final

from pydantic import ValidationError

from aliasdeck.domain.errors import InvalidRecordError
from aliasdeck.domain.model import AliasRecord, CatalogKind, ReferenceTarget, new_id

from .schema import OtpPairPayload, StoredOtpPair

OTP_STORAGE_KEY: Final[str] = "otp_pairs"
OTP_REFERENCE_PREFIX: Final[str] = "op://"
OTP_ATTRIBUTE_SUFFIX: Final[str] = "?attribute=otp"

_LINE_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"^\s*(.+?)\s*=\s*({re.escape(OTP_REFERENCE_PREFIX)}.*)\s*$"
)


def _reference(record: AliasRecord) -> str:
    if not isinstance(record.target, ReferenceTarget):
        raise TypeError(f"OTP record {record.alias!r} must have a reference target")
    return record.target.reference


@dataclass(frozen=True, slots=True)
class OtpCodec:
    kind: CatalogKind = CatalogKind.OTP
    storage_key: str = OTP_STORAGE_KEY
    supports_line_format: bool = True

    def encode(self, record: AliasRecord) -> dict[str, Any]:
        return {"id": record.id, "label": record.alias, "ref": _reference(record)}

    def decode(self, payload: object) -> AliasRecord | None:
        try:
            stored = StoredOtpPair.model_validate(payload)
        except ValidationError:
            return None
        return AliasRecord(id=stored.id, alias=stored.label, target=ReferenceTarget(stored.ref))

    def from_import(self, payload: object) -> AliasRecord | None:
        try:
            pair = OtpPairPayload.model_validate(payload)
        except ValidationError:
            return None
        return AliasRecord(id=new_id(), alias=pair.label, target=ReferenceTarget(pair.ref))

    def to_export(self, record: AliasRecord) -> dict[str, Any]:
        return {"label": record.alias, "ref": _reference(record)}

    def parse_line(self, line: str) -> AliasRecord | None:
        match = _LINE_PATTERN.match(line)
        if match is None:
            return None
        label = match.group(1).strip()
        reference = match.group(2).strip()
        if not label or not reference:
            return None
        return AliasRecord(id=new_id(), alias=label, target=ReferenceTarget(reference))


def normalize_reference(reference: str) -> str:
    """Drop double quotes and make sure the reference asks for the OTP attribute."""

    cleaned = reference.replace('"', "").strip()
    if not cleaned.endswith(OTP_ATTRIBUTE_SUFFIX):
        cleaned += OTP_ATTRIBUTE_SUFFIX
    return cleaned


def validate_otp_input(label: str, reference: str) -> tuple[str, ReferenceTarget]:
    """Validate form-style input for a new or edited pair."""

    label = label.strip()
    if not label or not reference.replace('"', "").strip():
        raise InvalidRecordError("Label and reference are required")
    return label, ReferenceTarget(normalize_reference(reference))
