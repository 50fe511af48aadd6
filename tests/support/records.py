from __future__ import annotations

from aliasdeck.domain.model import AliasRecord, ContextSelectorTarget, ReferenceTarget


def otp_record(label: str, ref: str, *, record_id: str | None = None) -> AliasRecord:
    record = AliasRecord(alias=label, target=ReferenceTarget(ref))
    return record if record_id is None else record.with_id(record_id)


def shortcut(
    alias: str,
    workspace: str,
    index: int,
    *keywords: str,
    record_id: str | None = None,
) -> AliasRecord:
    record = AliasRecord(
        alias=alias,
        target=ContextSelectorTarget(context_name=workspace, index=index),
        keywords=keywords,
    )
    return record if record_id is None else record.with_id(record_id)
