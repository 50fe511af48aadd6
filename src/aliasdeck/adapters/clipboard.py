"""macOS clipboard through ``pbcopy``/``pbpaste``."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass

from aliasdeck.domain.ports import ExternalToolError, ToolNotFoundError


@dataclass(slots=True)
class MacClipboard:
    timeout_seconds: float = 5.0

    def copy(self, text: str) -> None:
        self._run(["pbcopy"], stdin=text)

    def read_text(self) -> str:
        return self._run(["pbpaste"])

    def _run(self, command: list[str], *, stdin: str | None = None) -> str:
        try:
            completed = subprocess.run(  # noqa: S603
                command,
                input=stdin,
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
                check=False,
            )
        except (FileNotFoundError, PermissionError) as exc:
            raise ToolNotFoundError(f"{command[0]} is not available: {exc}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ExternalToolError(f"{command[0]} timed out") from exc
        if completed.returncode != 0:
            raise ExternalToolError(
                (completed.stderr or "").strip() or f"{command[0]} failed",
                exit_code=completed.returncode,
            )
        return completed.stdout or ""
