"""Workspace catalog and Arc automation configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import env_bool, env_float, env_str

DEFAULT_MODIFIER_KEY: Final[str] = "command"
DEFAULT_SETTLE_DELAY_SECONDS: Final[float] = 0.3
DEFAULT_SCRIPT_TIMEOUT_SECONDS: Final[float] = 10.0


@dataclass(frozen=True, slots=True)
class WorkspaceConfig:
    use_ui_scripting: bool = False
    modifier_key: str = DEFAULT_MODIFIER_KEY
    seed_text: str | None = None
    settle_delay_seconds: float = DEFAULT_SETTLE_DELAY_SECONDS
    script_timeout_seconds: float = DEFAULT_SCRIPT_TIMEOUT_SECONDS


def get_workspace_config() -> WorkspaceConfig:
    modifier = env_str("ALIASDECK_TAB_MODIFIER_KEY")
    return WorkspaceConfig(
        use_ui_scripting=env_bool("ALIASDECK_USE_UI_SCRIPTING", default=False),
        modifier_key=modifier.strip() if modifier else DEFAULT_MODIFIER_KEY,
        seed_text=env_str("ALIASDECK_WORKSPACE_SEED"),
        settle_delay_seconds=env_float(
            "ALIASDECK_SETTLE_DELAY", default=DEFAULT_SETTLE_DELAY_SECONDS
        ),
        script_timeout_seconds=env_float(
            "ALIASDECK_SCRIPT_TIMEOUT", default=DEFAULT_SCRIPT_TIMEOUT_SECONDS
        ),
    )
