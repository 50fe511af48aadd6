"""Arc browser automation through AppleScript."""

from __future__ import annotations

from .capabilities import ArcMenuSwitcher, ArcScriptSwitcher, ArcTabSelector
from .runner import run_osascript

__all__ = ["ArcMenuSwitcher", "ArcScriptSwitcher", "ArcTabSelector", "run_osascript"]
