"""Workspace catalog: ``alias -> (Arc space, tab index)`` shortcuts."""

from __future__ import annotations

from .schema import SelectorPayload, ShortcutPayload, StoredShortcut, TabPayload
from .translator import (
    WORKSPACE_STORAGE_KEY,
    WorkspaceCodec,
    parse_keywords,
    parse_tab_index,
    validate_workspace_input,
)

__all__ = [
    "WORKSPACE_STORAGE_KEY",
    "SelectorPayload",
    "ShortcutPayload",
    "StoredShortcut",
    "TabPayload",
    "WorkspaceCodec",
    "parse_keywords",
    "parse_tab_index",
    "validate_workspace_input",
]
