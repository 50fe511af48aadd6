"""Workspace-switch orchestration.

Opening a workspace record runs a short, strictly linear state machine::

    PRIMARY_SWITCH --ok--> SETTLE --> SELECTION --> done
          |                  ^
       skipped/failed        |
          v                  |
    FALLBACK_SWITCH --ok-----+
          |
        failed --> done (switch failed, selection never attempted)

No stage is retried. Every capability call is wrapped so that an exception is
recorded as a hard failure of that stage instead of escaping to the caller.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from aliasdeck.domain.model import ContextSelectorTarget

if TYPE_CHECKING:
    from collections.abc import Callable

    from aliasdeck.domain.model import AliasRecord
    from aliasdeck.domain.ports import ContextSwitcher, ItemSelector, ProgressListener

log = getLogger(__name__)

DEFAULT_MODIFIER_KEY = "command"
DEFAULT_SETTLE_DELAY_SECONDS = 0.3


class Stage(StrEnum):
    PRIMARY_SWITCH = "primary_switch"
    FALLBACK_SWITCH = "fallback_switch"
    SETTLE = "settle"
    SELECTION = "selection"


class StepStatus(StrEnum):
    SUCCESS = "success"
    SOFT_FAILURE = "soft_failure"  # capability answered False
    HARD_FAILURE = "hard_failure"  # capability raised
    SKIPPED = "skipped"


class OpenStatus(StrEnum):
    OPENED = "opened"
    SELECTION_FAILED = "selection_failed"
    SWITCH_FAILED = "switch_failed"
    BUSY = "busy"


class ProgressKind(StrEnum):
    STARTED = "started"
    STEP = "step"
    FINISHED = "finished"


@dataclass(slots=True, frozen=True)
class StepOutcome:
    stage: Stage
    status: StepStatus
    detail: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is StepStatus.SUCCESS


@dataclass(slots=True, frozen=True, kw_only=True)
class OpenOutcome:
    """Combined result of one orchestration."""

    status: OpenStatus
    record: AliasRecord
    steps: tuple[StepOutcome, ...] = ()

    @property
    def succeeded(self) -> bool:
        return self.status is OpenStatus.OPENED

    @property
    def title(self) -> str:
        return _TITLES[self.status]

    @property
    def message(self) -> str:
        target = self.record.target
        if not isinstance(target, ContextSelectorTarget):
            return f"{self.record.alias!r} has no workspace target"
        if self.status is OpenStatus.SWITCH_FAILED:
            return f"Could not switch to workspace: {target.context_name}"
        if self.status is OpenStatus.SELECTION_FAILED:
            return f"Could not open tab #{target.index}"
        if self.status is OpenStatus.BUSY:
            return "Another workspace switch is still in progress"
        return target.describe()

    def step(self, stage: Stage) -> StepOutcome | None:
        for step in self.steps:
            if step.stage is stage:
                return step
        return None


_TITLES: dict[OpenStatus, str] = {
    OpenStatus.OPENED: "Opened",
    OpenStatus.SELECTION_FAILED: "Workspace switched",
    OpenStatus.SWITCH_FAILED: "Failed",
    OpenStatus.BUSY: "Busy",
}


@dataclass(slots=True, frozen=True, kw_only=True)
class ProgressEvent:
    kind: ProgressKind
    title: str
    message: str
    step: StepOutcome | None = None
    outcome: OpenOutcome | None = None


def log_progress(event: ProgressEvent) -> None:
    """Default listener: report progress through the module logger."""

    if event.kind is ProgressKind.STEP and event.step is not None:
        log.debug("%s: %s (%s)", event.title, event.step.status, event.message)
        return
    log.info("%s: %s", event.title, event.message)


@dataclass(slots=True, frozen=True)
class OrchestratorSettings:
    use_primary_strategy: bool = False
    modifier_key: str = DEFAULT_MODIFIER_KEY
    settle_delay_seconds: float = DEFAULT_SETTLE_DELAY_SECONDS


class ReentrancyGuard:
    """Caller-visible in-progress flag; a second entry while active is refused."""

    def __init__(self) -> None:
        self._active = False

    @property
    def in_progress(self) -> bool:
        return self._active

    def try_enter(self) -> bool:
        if self._active:
            return False
        self._active = True
        return True

    def exit(self) -> None:
        self._active = False


@dataclass(slots=True)
class WorkspaceOrchestrator:
    """Switch to a record's workspace, then select its tab."""

    primary: ContextSwitcher
    fallback: ContextSwitcher
    selector: ItemSelector
    settings: OrchestratorSettings = field(default_factory=OrchestratorSettings)
    listener: ProgressListener = log_progress
    sleep: Callable[[float], None] = time.sleep
    guard: ReentrancyGuard = field(default_factory=ReentrancyGuard)

    @property
    def in_progress(self) -> bool:
        return self.guard.in_progress

    def open(self, record: AliasRecord) -> OpenOutcome:
        """Run the orchestration for ``record``.

        Calls made while a previous call is still running are dropped and
        reported as ``BUSY``.
        """

        target = record.target
        if not isinstance(target, ContextSelectorTarget):
            log.error("Cannot open %r: it has no workspace target", record.alias)
            step = StepOutcome(Stage.PRIMARY_SWITCH, StepStatus.HARD_FAILURE, "no workspace target")
            return OpenOutcome(status=OpenStatus.SWITCH_FAILED, record=record, steps=(step,))
        if not self.guard.try_enter():
            log.info("Dropping open request for %r: already in progress", record.alias)
            return OpenOutcome(status=OpenStatus.BUSY, record=record)
        try:
            return self._run(record, target)
        finally:
            self.guard.exit()

    def _run(self, record: AliasRecord, target: ContextSelectorTarget) -> OpenOutcome:
        self._notify(
            ProgressEvent(kind=ProgressKind.STARTED, title="Opening...", message=target.describe())
        )

        steps: list[StepOutcome] = []
        stage: Stage | None = Stage.PRIMARY_SWITCH
        while stage is not None:
            step = self._execute(stage, target)
            steps.append(step)
            self._notify(
                ProgressEvent(
                    kind=ProgressKind.STEP,
                    title=stage.value,
                    message=step.detail or target.describe(),
                    step=step,
                )
            )
            stage = _next_stage(step)

        outcome = OpenOutcome(status=_final_status(steps), record=record, steps=tuple(steps))
        self._notify(
            ProgressEvent(
                kind=ProgressKind.FINISHED,
                title=outcome.title,
                message=outcome.message,
                outcome=outcome,
            )
        )
        return outcome

    def _execute(self, stage: Stage, target: ContextSelectorTarget) -> StepOutcome:
        if stage is Stage.PRIMARY_SWITCH:
            if not self.settings.use_primary_strategy:
                return StepOutcome(stage, StepStatus.SKIPPED)
            return _attempt(stage, lambda: self.primary(target.context_name))
        if stage is Stage.FALLBACK_SWITCH:
            return _attempt(stage, lambda: self.fallback(target.context_name))
        if stage is Stage.SETTLE:
            self.sleep(self.settings.settle_delay_seconds)
            return StepOutcome(stage, StepStatus.SUCCESS)
        return _attempt(
            stage, lambda: self.selector(target.index, self.settings.modifier_key)
        )

    def _notify(self, event: ProgressEvent) -> None:
        try:
            self.listener(event)
        except Exception:
            log.exception("Progress listener failed for %s event", event.kind)


def _attempt(stage: Stage, call: Callable[[], bool]) -> StepOutcome:
    try:
        result = call()
    except Exception as exc:
        log.exception("Stage %s raised", stage)
        return StepOutcome(stage, StepStatus.HARD_FAILURE, detail=str(exc) or type(exc).__name__)
    if result is True:
        return StepOutcome(stage, StepStatus.SUCCESS)
    return StepOutcome(stage, StepStatus.SOFT_FAILURE)


def _next_stage(step: StepOutcome) -> Stage | None:
    if step.stage is Stage.PRIMARY_SWITCH:
        return Stage.SETTLE if step.succeeded else Stage.FALLBACK_SWITCH
    if step.stage is Stage.FALLBACK_SWITCH:
        return Stage.SETTLE if step.succeeded else None
    if step.stage is Stage.SETTLE:
        return Stage.SELECTION
    return None


def _final_status(steps: list[StepOutcome]) -> OpenStatus:
    last = steps[-1]
    if last.stage is not Stage.SELECTION:
        return OpenStatus.SWITCH_FAILED
    return OpenStatus.OPENED if last.succeeded else OpenStatus.SELECTION_FAILED
