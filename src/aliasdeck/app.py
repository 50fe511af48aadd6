"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass, replace
from logging import getLogger
from typing import TYPE_CHECKING

from aliasdeck.adapters.arc import ArcMenuSwitcher, ArcScriptSwitcher, ArcTabSelector
from aliasdeck.adapters.onepassword import OnePasswordCli, resolve_tool_path
from aliasdeck.adapters.sqlalchemy import SqlAlchemyKeyValueStore, is_started, startup
from aliasdeck.catalogs.otp import OtpCodec, validate_otp_input
from aliasdeck.catalogs.workspace import (
    WorkspaceCodec,
    parse_keywords,
    parse_tab_index,
    validate_workspace_input,
)
from aliasdeck.config import get_otp_config, get_workspace_config
from aliasdeck.domain.errors import InvalidRecordError
from aliasdeck.domain.model import ContextSelectorTarget
from aliasdeck.domain.orchestrator import (
    OrchestratorSettings,
    WorkspaceOrchestrator,
    log_progress,
)
from aliasdeck.domain.otp import fetch_code
from aliasdeck.domain.ports import ExternalToolError
from aliasdeck.domain.resolver import Resolution, find_by_alias, resolve
from aliasdeck.domain.store import RecordStore

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aliasdeck.config import OtpConfig, WorkspaceConfig
    from aliasdeck.domain.model import AliasRecord
    from aliasdeck.domain.orchestrator import OpenOutcome
    from aliasdeck.domain.otp import OtpResult
    from aliasdeck.domain.ports import KeyValueStore, OtpReader, ProgressListener

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class OtpLookup:
    resolution: Resolution
    result: OtpResult | None = None


@dataclass(slots=True, frozen=True)
class WorkspaceLookup:
    resolution: Resolution
    outcome: OpenOutcome | None = None


def default_blob_store() -> KeyValueStore:
    """Blob store on the configured database, initialising the adapter on first use."""

    if not is_started():
        startup()
    return SqlAlchemyKeyValueStore()


def build_otp_store(
    *,
    blobs: KeyValueStore | None = None,
    config: OtpConfig | None = None,
) -> RecordStore:
    effective_config = config or get_otp_config()
    return RecordStore(
        blobs or default_blob_store(),
        OtpCodec(),
        seed_text=effective_config.seed_text,
    )


def build_workspace_store(
    *,
    blobs: KeyValueStore | None = None,
    config: WorkspaceConfig | None = None,
) -> RecordStore:
    effective_config = config or get_workspace_config()
    return RecordStore(
        blobs or default_blob_store(),
        WorkspaceCodec(),
        seed_text=effective_config.seed_text,
    )


def build_otp_reader(config: OtpConfig | None = None) -> OnePasswordCli:
    effective_config = config or get_otp_config()
    return OnePasswordCli(
        path=resolve_tool_path(effective_config.op_path),
        timeout_seconds=effective_config.timeout_seconds,
    )


def build_orchestrator(
    config: WorkspaceConfig | None = None,
    *,
    listener: ProgressListener | None = None,
) -> WorkspaceOrchestrator:
    effective_config = config or get_workspace_config()
    timeout = effective_config.script_timeout_seconds
    return WorkspaceOrchestrator(
        primary=ArcMenuSwitcher(timeout_seconds=timeout),
        fallback=ArcScriptSwitcher(timeout_seconds=timeout),
        selector=ArcTabSelector(timeout_seconds=timeout),
        settings=OrchestratorSettings(
            use_primary_strategy=effective_config.use_ui_scripting,
            modifier_key=effective_config.modifier_key,
            settle_delay_seconds=effective_config.settle_delay_seconds,
        ),
        listener=listener or log_progress,
    )


def _require_alias(alias: str) -> str:
    if not alias or not alias.strip():
        raise InvalidRecordError("Please provide an alias")
    return alias


def _require_record(store: RecordStore, alias: str) -> AliasRecord:
    record = find_by_alias(store.load(), _require_alias(alias))
    if record is None:
        raise LookupError(f"No {store.codec.kind} entry found for alias: {alias}")
    return record


# OTP catalog ----------------------------------------------------------------


def add_otp_pair(store: RecordStore, label: str, reference: str) -> AliasRecord:
    label, target = validate_otp_input(label, reference)
    record = store.add(label, target)
    log.info("Added OTP pair %r", record.alias)
    return record


def edit_otp_pair(
    store: RecordStore,
    alias: str,
    *,
    label: str | None = None,
    reference: str | None = None,
) -> AliasRecord:
    current = _require_record(store, alias)
    new_label = label if label is not None else current.alias
    if reference is not None:
        new_label, target = validate_otp_input(new_label, reference)
    elif new_label.strip():
        # An untouched reference is stored exactly as it was.
        new_label, target = new_label.strip(), current.target
    else:
        raise InvalidRecordError("Label and reference are required")
    updated = replace(current, alias=new_label, target=target)
    store.update(updated)
    return updated.normalized()


def check_otp_tool(reader: OnePasswordCli) -> str | None:
    """Return the CLI version, or ``None`` when the tool cannot be run."""

    try:
        return reader.version()
    except ExternalToolError as exc:
        log.warning("1Password CLI not found or not available: %s", exc)
        return None


def get_otp_code(alias: str, *, store: RecordStore, reader: OtpReader) -> OtpLookup:
    resolution = resolve(store.load(), _require_alias(alias))
    if resolution.record is None:
        return OtpLookup(resolution=resolution)
    return OtpLookup(resolution=resolution, result=fetch_code(resolution.record, reader))


# Workspace catalog ----------------------------------------------------------


def add_workspace_shortcut(
    store: RecordStore,
    alias: str,
    workspace_name: str,
    tab_index: str | int,
    keywords: str | Iterable[str] | None = None,
) -> AliasRecord:
    alias, target, parsed_keywords = validate_workspace_input(
        alias, workspace_name, tab_index, keywords
    )
    record = store.add(alias, target, keywords=parsed_keywords)
    log.info("Added workspace shortcut %r", record.alias)
    return record


def edit_workspace_shortcut(  # noqa: PLR0913
    store: RecordStore,
    alias: str,
    *,
    new_alias: str | None = None,
    workspace_name: str | None = None,
    tab_index: str | int | None = None,
    keywords: str | Iterable[str] | None = None,
) -> AliasRecord:
    current = _require_record(store, alias)
    if not isinstance(current.target, ContextSelectorTarget):
        raise InvalidRecordError(f"{alias!r} is not a workspace shortcut")
    validated_alias, target, _ = validate_workspace_input(
        new_alias if new_alias is not None else current.alias,
        workspace_name if workspace_name is not None else current.target.context_name,
        parse_tab_index(tab_index) if tab_index is not None else current.target.index,
    )
    updated = replace(
        current,
        alias=validated_alias,
        target=target,
        keywords=parse_keywords(keywords) if keywords is not None else current.keywords,
    )
    store.update(updated)
    return updated.normalized()


def open_workspace_by_alias(
    alias: str,
    *,
    store: RecordStore,
    orchestrator: WorkspaceOrchestrator,
) -> WorkspaceLookup:
    resolution = resolve(store.load(), _require_alias(alias))
    if resolution.record is None:
        return WorkspaceLookup(resolution=resolution)
    return WorkspaceLookup(resolution=resolution, outcome=orchestrator.open(resolution.record))


# Shared ---------------------------------------------------------------------


def delete_by_alias(store: RecordStore, alias: str) -> AliasRecord:
    record = _require_record(store, alias)
    store.delete(record.id)
    log.info("Deleted %s entry %r", store.codec.kind, record.alias)
    return record
