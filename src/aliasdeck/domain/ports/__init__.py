"""Domain port definitions for adapters."""

from __future__ import annotations

from .automation import ContextSwitcher, ItemSelector, ProgressListener
from .catalog import CatalogCodec
from .clipboard import Clipboard
from .otp import ExternalToolError, OtpReader, ToolNotFoundError
from .persistence import KeyValueStore

__all__ = [
    "CatalogCodec",
    "Clipboard",
    "ContextSwitcher",
    "ExternalToolError",
    "ItemSelector",
    "KeyValueStore",
    "OtpReader",
    "ProgressListener",
    "ToolNotFoundError",
]
