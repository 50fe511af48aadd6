"""Run the 1Password ``op`` binary to read one-time codes."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Final

from aliasdeck.domain.ports import ExternalToolError, ToolNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

log = getLogger(__name__)

DEFAULT_OP_COMMAND: Final[str] = "op"
DEFAULT_OP_CANDIDATES: Final[tuple[str, ...]] = (
    "/opt/homebrew/bin/op",
    "/usr/local/bin/op",
    "/usr/bin/op",
)
DEFAULT_OP_TIMEOUT_SECONDS: Final[float] = 15.0


def _path_exists(path: str) -> bool:
    return Path(path).exists()


def resolve_tool_path(
    configured: str | None = None,
    *,
    candidates: Sequence[str] = DEFAULT_OP_CANDIDATES,
    exists: Callable[[str], bool] = _path_exists,
) -> str:
    """Pick the ``op`` binary: configured path, then well-known locations, then ``op``."""

    if configured and configured.strip():
        configured = configured.strip()
        if exists(configured):
            return configured
        log.warning("Configured op path %s does not exist; probing defaults", configured)
    for candidate in candidates:
        if exists(candidate):
            return candidate
    return DEFAULT_OP_COMMAND


@dataclass(slots=True)
class OnePasswordCli:
    path: str = DEFAULT_OP_COMMAND
    timeout_seconds: float = DEFAULT_OP_TIMEOUT_SECONDS

    def __call__(self, reference: str) -> str:
        return self.read(reference)

    def version(self) -> str:
        return self._run("--version")

    def read(self, reference: str) -> str:
        return self._run("read", reference)

    def _run(self, *args: str) -> str:
        command = [self.path, *args]
        try:
            completed = subprocess.run(  # noqa: S603
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
                check=False,
            )
        except (FileNotFoundError, PermissionError) as exc:
            raise ToolNotFoundError(f"1Password CLI not available at {self.path}: {exc}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ExternalToolError(
                f"1Password CLI timed out after {self.timeout_seconds:g}s"
            ) from exc

        if completed.returncode != 0:
            diagnostics = (completed.stderr or "").strip()
            raise ExternalToolError(
                diagnostics or f"{self.path} exited with status {completed.returncode}",
                exit_code=completed.returncode,
            )
        return (completed.stdout or "").strip()
