"""1Password CLI adapter."""

from __future__ import annotations

from .cli import DEFAULT_OP_CANDIDATES, DEFAULT_OP_COMMAND, OnePasswordCli, resolve_tool_path

__all__ = ["DEFAULT_OP_CANDIDATES", "DEFAULT_OP_COMMAND", "OnePasswordCli", "resolve_tool_path"]
