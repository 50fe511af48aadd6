"""Arc automation capabilities implementing the domain automation ports.

Each capability answers with a boolean and never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger

from aliasdeck.domain.ports import ExternalToolError

from .runner import DEFAULT_SCRIPT_TIMEOUT_SECONDS, ScriptRunner, run_osascript
from .scripts import menu_switch_script, space_focus_script, tab_keystroke_script

log = getLogger(__name__)


@dataclass(slots=True)
class ArcMenuSwitcher:
    """Primary strategy: System Events menu-bar scripting."""

    timeout_seconds: float = DEFAULT_SCRIPT_TIMEOUT_SECONDS
    run_script: ScriptRunner = run_osascript

    def __call__(self, context_name: str) -> bool:
        try:
            result = self.run_script(menu_switch_script(context_name), timeout=self.timeout_seconds)
        except (ExternalToolError, OSError, ValueError) as exc:
            log.warning("Failed to switch workspace via UI: %s", exc)
            return False
        return result.strip() == "true"


@dataclass(slots=True)
class ArcScriptSwitcher:
    """Fallback strategy: Arc's own scripting dictionary."""

    timeout_seconds: float = DEFAULT_SCRIPT_TIMEOUT_SECONDS
    run_script: ScriptRunner = run_osascript

    def __call__(self, context_name: str) -> bool:
        try:
            result = self.run_script(space_focus_script(context_name), timeout=self.timeout_seconds)
        except (ExternalToolError, OSError, ValueError) as exc:
            log.warning("Failed to switch workspace via AppleScript: %s", exc)
            return False
        return result.strip() == "true"


@dataclass(slots=True)
class ArcTabSelector:
    timeout_seconds: float = DEFAULT_SCRIPT_TIMEOUT_SECONDS
    run_script: ScriptRunner = run_osascript

    def __call__(self, index: int, modifier_key: str) -> bool:
        try:
            self.run_script(tab_keystroke_script(index, modifier_key), timeout=self.timeout_seconds)
        except (ExternalToolError, OSError, ValueError) as exc:
            log.warning("Failed to open tab by index: %s", exc)
            return False
        return True
