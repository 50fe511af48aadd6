from __future__ import annotations

import pytest

from aliasdeck.catalogs import codec_for
from aliasdeck.catalogs.workspace import (
    WorkspaceCodec,
    parse_keywords,
    parse_tab_index,
    validate_workspace_input,
)
from aliasdeck.domain.errors import InvalidRecordError
from aliasdeck.domain.model import CatalogKind, ContextSelectorTarget
from aliasdeck.domain.ports import CatalogCodec
from tests.support.records import shortcut


def test_codec_for_returns_catalog_codecs() -> None:
    workspace = codec_for(CatalogKind.WORKSPACE)

    assert isinstance(workspace, WorkspaceCodec)
    assert isinstance(workspace, CatalogCodec)
    assert codec_for(CatalogKind.OTP).storage_key == "otp_pairs"
    assert workspace.storage_key == "arc_shortcuts"
    assert not workspace.supports_line_format


def test_encode_uses_nested_wire_shape() -> None:
    record = shortcut("Docs", "Work", 3, "wiki", record_id="abc")

    assert WorkspaceCodec().encode(record) == {
        "id": "abc",
        "alias": "Docs",
        "workspaceName": "Work",
        "tab": {"selector": {"index": 3}},
        "keywords": ["wiki"],
    }


def test_decode_round_trips_encoded_record() -> None:
    codec = WorkspaceCodec()
    record = shortcut("Docs", "Work", 3, "wiki", "notes", record_id="abc")

    assert codec.decode(codec.encode(record)) == record


def test_decode_tolerates_missing_keywords() -> None:
    record = WorkspaceCodec().decode(
        {"id": "1", "alias": "Docs", "workspaceName": "Work", "tab": {"selector": {"index": 1}}}
    )

    assert record is not None
    assert record.keywords == ()


@pytest.mark.parametrize(
    "payload",
    [
        {"alias": "Docs", "workspaceName": "Work", "tab": {"selector": {"index": 1}}},
        {"id": "1", "alias": "Docs", "tab": {"selector": {"index": 1}}},
        {"id": "1", "alias": "Docs", "workspaceName": "Work", "tab": {"selector": {}}},
        {"id": "1", "alias": "Docs", "workspaceName": "Work", "tab": {"selector": {"index": -1}}},
        {"id": "1", "alias": "Docs", "workspaceName": "Work", "tab": {"selector": {"index": True}}},
        {"id": "1", "alias": "", "workspaceName": "Work", "tab": {"selector": {"index": 1}}},
    ],
)
def test_decode_rejects_incomplete_entries(payload: object) -> None:
    assert WorkspaceCodec().decode(payload) is None


def test_parse_line_is_unsupported() -> None:
    assert WorkspaceCodec().parse_line("Docs = op://x") is None


@pytest.mark.parametrize(("value", "expected"), [("3", 3), (" 12 ", 12), (1, 1)])
def test_parse_tab_index_accepts_positive_numbers(value: str | int, expected: int) -> None:
    assert parse_tab_index(value) == expected


@pytest.mark.parametrize("value", ["0", "-2", "two", "", 0, True, "1_0", "+3", "\u0663", "3.0"])
def test_parse_tab_index_rejects(value: str | int) -> None:
    with pytest.raises(InvalidRecordError, match="Tab index must be a positive number"):
        parse_tab_index(value)


def test_parse_keywords_splits_and_drops_blanks() -> None:
    assert parse_keywords(" wiki, ,notes ,") == ("wiki", "notes")
    assert parse_keywords(["a", " ", "b "]) == ("a", "b")
    assert parse_keywords(None) == ()


def test_validate_workspace_input() -> None:
    alias, target, keywords = validate_workspace_input(" Docs ", " Work ", "4", "wiki")

    assert alias == "Docs"
    assert target == ContextSelectorTarget(context_name="Work", index=4)
    assert keywords == ("wiki",)


@pytest.mark.parametrize(
    ("alias", "workspace", "tab"),
    [("", "Work", "1"), ("Docs", " ", "1"), ("Docs", "Work", " ")],
)
def test_validate_workspace_input_requires_fields(alias: str, workspace: str, tab: str) -> None:
    with pytest.raises(InvalidRecordError, match="Alias, workspace name, and tab index"):
        validate_workspace_input(alias, workspace, tab)
