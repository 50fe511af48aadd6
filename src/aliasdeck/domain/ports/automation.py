"""Ports for UI automation capabilities.

Capabilities report success as a boolean. Implementations should not raise, but
callers treat any exception as a failed step.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from aliasdeck.domain.orchestrator import ProgressEvent


@runtime_checkable
class ContextSwitcher(Protocol):
    """Focus a named workspace."""

    def __call__(self, context_name: str) -> bool: ...


@runtime_checkable
class ItemSelector(Protocol):
    """Select the item at ``index`` using ``modifier_key`` plus the number key."""

    def __call__(self, index: int, modifier_key: str) -> bool: ...


@runtime_checkable
class ProgressListener(Protocol):
    def __call__(self, event: ProgressEvent) -> None: ...


__all__ = ["ContextSwitcher", "ItemSelector", "ProgressListener"]
