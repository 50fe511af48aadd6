"""Dict-backed blob store for tests and dry runs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class InMemoryKeyValueStore:
    blobs: dict[str, str] = field(default_factory=dict[str, str])
    writes: int = 0

    def get(self, key: str) -> str | None:
        return self.blobs.get(key)

    def set(self, key: str, value: str) -> None:
        self.blobs[key] = value
        self.writes += 1
