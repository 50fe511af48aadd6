"""Ports for reading one-time codes from an external tool."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class ExternalToolError(RuntimeError):
    """Raised when an external command fails; the message carries its diagnostics."""

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ToolNotFoundError(ExternalToolError):
    """Raised when the external command cannot be located or executed."""


@runtime_checkable
class OtpReader(Protocol):
    """Callable port returning the current code for a reference."""

    def __call__(self, reference: str) -> str: ...


__all__ = ["ExternalToolError", "OtpReader", "ToolNotFoundError"]
