"""Execute AppleScript via ``osascript``."""

from __future__ import annotations

import subprocess
from typing import Final, Protocol

from aliasdeck.domain.ports import ExternalToolError, ToolNotFoundError

OSASCRIPT: Final[str] = "osascript"
DEFAULT_SCRIPT_TIMEOUT_SECONDS: Final[float] = 10.0


class ScriptRunner(Protocol):
    def __call__(self, script: str, *, timeout: float) -> str: ...


def run_osascript(script: str, *, timeout: float = DEFAULT_SCRIPT_TIMEOUT_SECONDS) -> str:
    """Run ``script`` and return its stripped stdout."""

    try:
        completed = subprocess.run(  # noqa: S603
            [OSASCRIPT, "-e", script],
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except (FileNotFoundError, PermissionError) as exc:
        raise ToolNotFoundError(f"{OSASCRIPT} is not available: {exc}") from exc
    except subprocess.TimeoutExpired as exc:
        raise ExternalToolError(f"AppleScript timed out after {timeout:g}s") from exc

    if completed.returncode != 0:
        diagnostics = (completed.stderr or "").strip()
        raise ExternalToolError(
            diagnostics or f"{OSASCRIPT} exited with status {completed.returncode}",
            exit_code=completed.returncode,
        )
    return (completed.stdout or "").strip()
