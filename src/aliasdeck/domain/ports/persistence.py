"""Ports for persisting catalogs."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Opaque string blob storage, one blob per key.

    ``set`` replaces the whole value; there are no partial writes.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...
