from __future__ import annotations

import subprocess
from typing import Any

import pytest

from aliasdeck.adapters.onepassword import OnePasswordCli, resolve_tool_path
from aliasdeck.adapters.onepassword import cli as cli_module
from aliasdeck.domain.ports import ExternalToolError, OtpReader, ToolNotFoundError


class RunRecorder:
    def __init__(
        self,
        *,
        returncode: int = 0,
        stdout: str = "",
        stderr: str = "",
        error: Exception | None = None,
    ) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.error = error
        self.calls: list[tuple[list[str], dict[str, Any]]] = []

    def __call__(self, command: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        self.calls.append((command, kwargs))
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(command, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def run(monkeypatch: pytest.MonkeyPatch) -> RunRecorder:
    recorder = RunRecorder(stdout="123456\n")
    monkeypatch.setattr(cli_module.subprocess, "run", recorder)
    return recorder


def test_read_invokes_op_with_reference(run: RunRecorder) -> None:
    reader = OnePasswordCli(path="/opt/homebrew/bin/op", timeout_seconds=3)

    assert isinstance(reader, OtpReader)
    assert reader("op://V/I/F?attribute=otp") == "123456"
    command, kwargs = run.calls[0]
    assert command == ["/opt/homebrew/bin/op", "read", "op://V/I/F?attribute=otp"]
    assert kwargs["timeout"] == 3
    assert kwargs["check"] is False


def test_version_runs_version_flag(run: RunRecorder) -> None:
    run.stdout = "2.30.0\n"

    assert OnePasswordCli().version() == "2.30.0"
    assert run.calls[0][0] == ["op", "--version"]


def test_non_zero_exit_carries_stderr(run: RunRecorder) -> None:
    run.returncode = 1
    run.stderr = "[ERROR] could not find item\n"

    with pytest.raises(ExternalToolError) as excinfo:
        OnePasswordCli().read("op://V/Missing/F")

    assert str(excinfo.value) == "[ERROR] could not find item"
    assert excinfo.value.exit_code == 1
    assert not isinstance(excinfo.value, ToolNotFoundError)


def test_non_zero_exit_without_stderr(run: RunRecorder) -> None:
    run.returncode = 6

    with pytest.raises(ExternalToolError, match="op exited with status 6"):
        OnePasswordCli().read("op://V/I/F")


def test_missing_binary_is_tool_not_found(run: RunRecorder) -> None:
    run.error = FileNotFoundError(2, "No such file or directory")

    with pytest.raises(ToolNotFoundError):
        OnePasswordCli(path="/nowhere/op").read("op://V/I/F")


def test_timeout_is_a_tool_error(run: RunRecorder) -> None:
    run.error = subprocess.TimeoutExpired(cmd="op", timeout=1)

    with pytest.raises(ExternalToolError, match="timed out"):
        OnePasswordCli(timeout_seconds=1).read("op://V/I/F")


def test_resolve_tool_path_prefers_existing_configured_path() -> None:
    existing = {"/custom/op", "/usr/local/bin/op"}

    assert resolve_tool_path("/custom/op", exists=existing.__contains__) == "/custom/op"


def test_resolve_tool_path_probes_candidates_in_order() -> None:
    existing = {"/usr/local/bin/op", "/usr/bin/op"}

    assert resolve_tool_path("/missing/op", exists=existing.__contains__) == "/usr/local/bin/op"
    assert resolve_tool_path(None, exists=existing.__contains__) == "/usr/local/bin/op"


def test_resolve_tool_path_falls_back_to_search_path() -> None:
    assert resolve_tool_path("  ", exists=lambda _path: False) == "op"
