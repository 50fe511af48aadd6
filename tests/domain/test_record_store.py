from __future__ import annotations

import json

from aliasdeck.adapters.memory import InMemoryKeyValueStore
from aliasdeck.catalogs.otp import OtpCodec
from aliasdeck.catalogs.workspace import WorkspaceCodec
from aliasdeck.domain.model import AliasRecord, ContextSelectorTarget, ReferenceTarget
from aliasdeck.domain.store import RecordStore
from tests.support.records import otp_record, shortcut


def test_load_returns_empty_without_blob_or_seed(otp_store: RecordStore) -> None:
    assert otp_store.load() == []


def test_load_seeds_once_from_json_and_persists(blobs: InMemoryKeyValueStore) -> None:
    seed = '[{"label":"Mail","ref":"op://V/I/F?attribute=otp"}]'
    store = RecordStore(blobs, OtpCodec(), seed_text=seed)

    records = store.load()

    assert [(r.alias, r.target) for r in records] == [
        ("Mail", ReferenceTarget("op://V/I/F?attribute=otp"))
    ]
    stored = json.loads(blobs.blobs["otp_pairs"])
    assert stored == [{"id": records[0].id, "label": "Mail", "ref": "op://V/I/F?attribute=otp"}]
    assert store.load() == records


def test_seed_is_ignored_once_a_collection_exists(blobs: InMemoryKeyValueStore) -> None:
    blobs.set("otp_pairs", "[]")
    store = RecordStore(blobs, OtpCodec(), seed_text="Mail = op://V/I/F")

    assert store.load() == []
    assert blobs.blobs["otp_pairs"] == "[]"


def test_seed_without_valid_entries_writes_nothing(blobs: InMemoryKeyValueStore) -> None:
    store = RecordStore(blobs, OtpCodec(), seed_text="not a pair")

    assert store.load() == []
    assert blobs.writes == 0


def test_workspace_seed_accepts_json(blobs: InMemoryKeyValueStore) -> None:
    seed = json.dumps(
        [{"alias": "Docs", "workspaceName": "Work", "tab": {"selector": {"index": 2}}}]
    )
    store = RecordStore(blobs, WorkspaceCodec(), seed_text=seed)

    (record,) = store.load()

    assert record.target == ContextSelectorTarget(context_name="Work", index=2)
    assert "arc_shortcuts" in blobs.blobs


def test_corrupt_blob_is_treated_as_empty_and_heals_on_save(
    blobs: InMemoryKeyValueStore, otp_store: RecordStore
) -> None:
    blobs.set("otp_pairs", "{not json")

    assert otp_store.load() == []

    otp_store.add("Mail", ReferenceTarget("op://V/I/F"))
    assert [r.alias for r in otp_store.load()] == ["Mail"]


def test_non_array_blob_is_treated_as_empty(
    blobs: InMemoryKeyValueStore, otp_store: RecordStore
) -> None:
    blobs.set("otp_pairs", '{"label": "Mail"}')

    assert otp_store.load() == []


def test_incomplete_stored_entries_are_dropped(
    blobs: InMemoryKeyValueStore, otp_store: RecordStore
) -> None:
    blobs.set(
        "otp_pairs",
        json.dumps(
            [
                {"id": "1", "label": "Mail", "ref": "op://a"},
                {"label": "No id", "ref": "op://b"},
                {"id": "3", "label": "", "ref": "op://c"},
                "garbage",
            ]
        ),
    )

    assert [r.id for r in otp_store.load()] == ["1"]


def test_save_load_round_trip_keeps_every_field(workspace_store: RecordStore) -> None:
    records = [
        shortcut("Docs", "Work", 3, "wiki", "notes", record_id="a"),
        shortcut("Mail", "Personal", 1, record_id="b"),
    ]

    workspace_store.save(records)

    assert workspace_store.load() == records


def test_save_normalizes_fields_and_assigns_missing_ids(otp_store: RecordStore) -> None:
    otp_store.save([AliasRecord(id="", alias="  Mail ", target=ReferenceTarget(" op://x "))])

    (loaded,) = otp_store.load()

    assert loaded.alias == "Mail"
    assert loaded.target == ReferenceTarget("op://x")
    assert loaded.id


def test_save_is_idempotent_after_normalization(otp_store: RecordStore) -> None:
    otp_store.save([otp_record(" Mail ", " op://x ")])
    first = otp_store.load()

    otp_store.save(first)

    assert otp_store.load() == first


def test_add_appends_with_fresh_id(otp_store: RecordStore) -> None:
    first = otp_store.add("Mail", ReferenceTarget("op://a"))
    second = otp_store.add("Bank", ReferenceTarget("op://b"))

    assert first.id != second.id
    assert [r.alias for r in otp_store.load()] == ["Mail", "Bank"]


def test_add_does_not_check_alias_collisions(otp_store: RecordStore) -> None:
    # Only merge/import dedupe by alias; direct add keeps both entries.
    otp_store.add("Mail", ReferenceTarget("op://a"))
    otp_store.add("mail", ReferenceTarget("op://b"))

    assert [r.alias for r in otp_store.load()] == ["Mail", "mail"]


def test_update_replaces_matching_record(workspace_store: RecordStore) -> None:
    created = workspace_store.add("Docs", ContextSelectorTarget("Work", 1), keywords=["wiki"])

    changed = AliasRecord(
        id=created.id,
        alias=" Documents ",
        target=ContextSelectorTarget(" Team ", 4),
        keywords=(" handbook ", ""),
    )
    assert workspace_store.update(changed) is True

    (loaded,) = workspace_store.load()
    assert loaded == AliasRecord(
        id=created.id,
        alias="Documents",
        target=ContextSelectorTarget("Team", 4),
        keywords=("handbook",),
    )


def test_update_with_unknown_id_is_a_silent_no_op(
    blobs: InMemoryKeyValueStore, otp_store: RecordStore
) -> None:
    otp_store.add("Mail", ReferenceTarget("op://a"))
    writes = blobs.writes

    assert otp_store.update(otp_record("Other", "op://b", record_id="missing")) is False
    assert blobs.writes == writes
    assert [r.alias for r in otp_store.load()] == ["Mail"]


def test_delete_removes_by_id(otp_store: RecordStore) -> None:
    keep = otp_store.add("Mail", ReferenceTarget("op://a"))
    drop = otp_store.add("Bank", ReferenceTarget("op://b"))

    assert otp_store.delete(drop.id) is True
    assert otp_store.load() == [keep]
    assert otp_store.delete("missing") is False


def test_import_text_merges_line_entries_into_existing(otp_store: RecordStore) -> None:
    otp_store.save([otp_record("Work", "op://OLD", record_id="work-id")])

    summary = otp_store.import_text("Work = op://V2/I2/F2?attribute=otp")

    assert summary.incoming == 1
    assert summary.updated == 1
    assert summary.added == 0
    (record,) = otp_store.load()
    assert record.id == "work-id"
    assert record.target == ReferenceTarget("op://V2/I2/F2?attribute=otp")


def test_import_text_with_nothing_valid_leaves_store_untouched(
    blobs: InMemoryKeyValueStore, otp_store: RecordStore
) -> None:
    otp_store.add("Mail", ReferenceTarget("op://a"))
    writes = blobs.writes

    summary = otp_store.import_text("hello world")

    assert not summary.imported
    assert blobs.writes == writes


def test_export_text_omits_ids(otp_store: RecordStore) -> None:
    otp_store.add("Mail", ReferenceTarget("op://a"))

    exported = json.loads(otp_store.export_text())

    assert exported == [{"label": "Mail", "ref": "op://a"}]


def test_later_save_wins_over_earlier_overlapping_write(
    blobs: InMemoryKeyValueStore,
) -> None:
    first = RecordStore(blobs, OtpCodec())
    second = RecordStore(blobs, OtpCodec())
    snapshot = first.load()
    second.add("Bank", ReferenceTarget("op://b"))

    first.save([*snapshot, otp_record("Mail", "op://a")])

    assert [r.alias for r in second.load()] == ["Mail"]


def test_deeply_nested_seed_still_seeds_from_lines(blobs: InMemoryKeyValueStore) -> None:
    store = RecordStore(blobs, OtpCodec(), seed_text="[" * 100_000 + "\nMail = op://V/I/F")

    assert [r.alias for r in store.load()] == ["Mail"]


def test_deeply_nested_stored_blob_is_treated_as_empty(
    blobs: InMemoryKeyValueStore, otp_store: RecordStore
) -> None:
    blobs.set("otp_pairs", "[" * 100_000)

    assert otp_store.load() == []
