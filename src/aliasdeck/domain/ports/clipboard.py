"""Clipboard transport used by copy, import and export flows."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clipboard(Protocol):
    def copy(self, text: str) -> None: ...

    def read_text(self) -> str: ...
