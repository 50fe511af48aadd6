# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from aliasdeck.adapters.clipboard import MacClipboard
from aliasdeck.app import (
    add_otp_pair,
    add_workspace_shortcut,
    build_orchestrator,
    build_otp_reader,
    build_otp_store,
    build_workspace_store,
    check_otp_tool,
    delete_by_alias,
    edit_otp_pair,
    edit_workspace_shortcut,
    get_otp_code,
    open_workspace_by_alias,
)
from aliasdeck.config import ConfigurationError, configure_logging
from aliasdeck.domain.errors import InvalidRecordError
from aliasdeck.domain.otp import OtpStatus
from aliasdeck.domain.resolver import ResolutionStatus, filter_records, sort_for_display

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from types import FrameType

    from aliasdeck.domain.model import AliasRecord
    from aliasdeck.domain.ports import Clipboard
    from aliasdeck.domain.resolver import Resolution
    from aliasdeck.domain.store import RecordStore

log = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_clipboard() -> Clipboard:
    return MacClipboard()


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Resolve aliases to OTP references and Arc workspace tabs"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    catalogs = parser.add_subparsers(dest="catalog", required=True)

    otp = catalogs.add_parser("otp", help="Manage and read OTP pairs")
    otp_sub = otp.add_subparsers(dest="command", required=True)
    otp_list = otp_sub.add_parser("list", help="List OTP pairs")
    otp_list.add_argument("--query", type=str, default="", help="Filter by label or reference")
    otp_add = otp_sub.add_parser("add", help="Add an OTP pair")
    otp_add.add_argument("label", type=str, help="Label, e.g. 'Google Abc Ltd'")
    otp_add.add_argument("reference", type=str, help="op://Vault/Item/Field reference")
    otp_edit = otp_sub.add_parser("edit", help="Edit an OTP pair")
    otp_edit.add_argument("alias", type=str, help="Current label")
    otp_edit.add_argument("--label", type=str, help="New label")
    otp_edit.add_argument("--ref", type=str, dest="reference", help="New reference")
    otp_delete = otp_sub.add_parser("delete", help="Delete an OTP pair")
    otp_delete.add_argument("alias", type=str, help="Label of the pair")
    otp_get = otp_sub.add_parser("get", help="Read the current code for a label")
    otp_get.add_argument("alias", type=str, help="Label of the pair")
    otp_get.add_argument("--copy", action="store_true", help="Copy the code to the clipboard")
    otp_sub.add_parser("check", help="Check that the 1Password CLI is available")
    _add_transfer_commands(otp_sub, "OTP pairs (JSON or 'Label = op://...' lines)")

    workspace = catalogs.add_parser("workspace", help="Manage and open Arc workspace shortcuts")
    ws_sub = workspace.add_subparsers(dest="command", required=True)
    ws_list = ws_sub.add_parser("list", help="List shortcuts sorted by workspace and tab")
    ws_list.add_argument(
        "--query", type=str, default="", help="Filter by alias, workspace, tab or keyword"
    )
    ws_add = ws_sub.add_parser("add", help="Add a shortcut")
    ws_add.add_argument("alias", type=str, help="Alias, e.g. 'Abc Ltd Gmail'")
    ws_add.add_argument("--workspace", type=str, required=True, help="Arc space name")
    ws_add.add_argument("--tab", type=str, required=True, help="1-based tab index")
    ws_add.add_argument("--keywords", type=str, help="Comma-separated search keywords")
    ws_edit = ws_sub.add_parser("edit", help="Edit a shortcut")
    ws_edit.add_argument("alias", type=str, help="Current alias")
    ws_edit.add_argument("--alias", dest="new_alias", type=str, help="New alias")
    ws_edit.add_argument("--workspace", type=str, help="Arc space name")
    ws_edit.add_argument("--tab", type=str, help="1-based tab index")
    ws_edit.add_argument("--keywords", type=str, help="Comma-separated search keywords")
    ws_delete = ws_sub.add_parser("delete", help="Delete a shortcut")
    ws_delete.add_argument("alias", type=str, help="Alias of the shortcut")
    ws_open = ws_sub.add_parser("open", help="Switch to the shortcut's workspace and tab")
    ws_open.add_argument("alias", type=str, help="Alias of the shortcut")
    _add_transfer_commands(ws_sub, "shortcuts (JSON array)")

    return parser.parse_args(list(argv))


def _add_transfer_commands(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser], what: str
) -> None:
    importer = subparsers.add_parser("import", help=f"Import {what}")
    importer.add_argument("source", nargs="?", default="-", help="File to read, '-' for stdin")
    importer.add_argument(
        "--clipboard", action="store_true", help="Read the import text from the clipboard"
    )
    exporter = subparsers.add_parser("export", help="Export as re-importable JSON")
    exporter.add_argument(
        "--clipboard", action="store_true", help="Copy the export to the clipboard"
    )


def _print_records(records: Sequence[AliasRecord]) -> None:
    for record in records:
        suffix = f"  [{', '.join(record.keywords)}]" if record.keywords else ""
        print(f"{record.alias}\t{record.target.describe()}{suffix}")


def _report_miss(resolution: Resolution, store: RecordStore) -> int:
    if resolution.status is ResolutionStatus.EMPTY:
        log.error("No %s entries configured yet; add or import some first", store.codec.kind)
    else:
        log.error("No mapping found for alias: %s", resolution.query)
    return EXIT_FAILURE


def _read_import_text(args: argparse.Namespace) -> str:
    if args.clipboard:
        return build_clipboard().read_text()
    if args.source == "-":
        return sys.stdin.read()
    return Path(args.source).read_text(encoding="utf-8")


def _import(store: RecordStore, args: argparse.Namespace) -> int:
    text = _read_import_text(args)
    if not text.strip():
        log.error("Nothing to import: input is empty")
        return EXIT_FAILURE
    summary = store.import_text(text)
    if not summary.imported:
        log.error("Nothing to import: no valid entries found")
        return EXIT_FAILURE
    log.info(
        "Imported %d entr%s (%d added, %d updated, %d total)",
        summary.incoming,
        "y" if summary.incoming == 1 else "ies",
        summary.added,
        summary.updated,
        summary.total,
    )
    return 0


def _export(store: RecordStore, args: argparse.Namespace) -> int:
    text = store.export_text()
    if args.clipboard:
        build_clipboard().copy(text)
        log.info("Exported to clipboard")
    else:
        print(text)
    return 0


def _run_otp(args: argparse.Namespace) -> int:  # noqa: PLR0911
    command = args.command
    if command == "check":
        version = check_otp_tool(build_otp_reader())
        if version is None:
            log.error("Install the 1Password CLI or set ALIASDECK_OP_PATH")
            return EXIT_FAILURE
        print(f"1Password CLI {version}")
        return 0

    store = build_otp_store()
    if command == "list":
        _print_records(filter_records(store.load(), args.query))
        return 0
    if command == "add":
        record = add_otp_pair(store, args.label, args.reference)
        print(f"{record.alias}\t{record.target.describe()}")
        return 0
    if command == "edit":
        edit_otp_pair(store, args.alias, label=args.label, reference=args.reference)
        return 0
    if command == "delete":
        delete_by_alias(store, args.alias)
        return 0
    if command == "get":
        return _get_otp(store, args)
    if command == "import":
        return _import(store, args)
    if command == "export":
        return _export(store, args)
    raise ValueError(f"Unsupported command: otp {command}")


def _get_otp(store: RecordStore, args: argparse.Namespace) -> int:
    lookup = get_otp_code(args.alias, store=store, reader=build_otp_reader())
    if lookup.result is None:
        return _report_miss(lookup.resolution, store)
    result = lookup.result
    if result.status is OtpStatus.TOOL_UNAVAILABLE:
        log.error("1Password CLI not found or not available: %s", result.message)
        return EXIT_FAILURE
    if not result.succeeded or result.code is None:
        log.error("Failed to get OTP: %s", result.message)
        return EXIT_FAILURE
    if args.copy:
        build_clipboard().copy(result.code)
        log.info("OTP copied: %s", result.record.alias)
    else:
        print(result.code)
    return 0


def _run_workspace(args: argparse.Namespace) -> int:
    store = build_workspace_store()
    command = args.command
    if command == "list":
        _print_records(sort_for_display(filter_records(store.load(), args.query)))
        return 0
    if command == "add":
        record = add_workspace_shortcut(
            store, args.alias, args.workspace, args.tab, args.keywords
        )
        print(f"{record.alias}\t{record.target.describe()}")
        return 0
    if command == "edit":
        edit_workspace_shortcut(
            store,
            args.alias,
            new_alias=args.new_alias,
            workspace_name=args.workspace,
            tab_index=args.tab,
            keywords=args.keywords,
        )
        return 0
    if command == "delete":
        delete_by_alias(store, args.alias)
        return 0
    if command == "open":
        return _open_workspace(store, args)
    if command == "import":
        return _import(store, args)
    if command == "export":
        return _export(store, args)
    raise ValueError(f"Unsupported command: workspace {command}")


def _open_workspace(store: RecordStore, args: argparse.Namespace) -> int:
    lookup = open_workspace_by_alias(args.alias, store=store, orchestrator=build_orchestrator())
    if lookup.outcome is None:
        return _report_miss(lookup.resolution, store)
    outcome = lookup.outcome
    if not outcome.succeeded:
        log.error("%s: %s", outcome.title, outcome.message)
        return EXIT_FAILURE
    return 0


_HANDLERS: dict[str, Callable[[argparse.Namespace], int]] = {
    "otp": _run_otp,
    "workspace": _run_workspace,
}


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        code = _HANDLERS[parsed_args.catalog](parsed_args)
    except (InvalidRecordError, ConfigurationError) as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(EXIT_USAGE)
    except LookupError as exc:
        log.error("%s", exc.args[0] if exc.args else exc)  # noqa: TRY400
        sys.exit(EXIT_FAILURE)
    except Exception:
        log.exception("Command failed")
        sys.exit(EXIT_FAILURE)

    if code:
        sys.exit(code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
