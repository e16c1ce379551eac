"""Ordered fan-out pipeline with per-step failure classification.

Each step is tagged HARD or SOFT. A HARD step that raises halts the
pipeline; a SOFT step that raises or reports a falsy result is recorded as
RECOVERED and the pipeline moves on. Every step yields a ``StepResult`` so
callers can see what happened without catching anything.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


class StepKind(Enum):
    HARD = "hard"
    SOFT = "soft"


class StepStatus(Enum):
    COMPLETED = "completed"
    SKIPPED = "skipped"
    RECOVERED = "recovered"
    FAILED = "failed"


@dataclass(frozen=True)
class Step:
    name: str
    kind: StepKind
    action: Callable[[], Any]
    skip_reason: str | None = None
    pause_after: float = 0.0


@dataclass(frozen=True)
class StepResult:
    name: str
    status: StepStatus
    error: str | None = None


@dataclass(frozen=True)
class PipelineResult:
    steps: list[StepResult] = field(default_factory=list)

    @property
    def failed_step(self) -> StepResult | None:
        for result in self.steps:
            if result.status == StepStatus.FAILED:
                return result
        return None

    @property
    def succeeded(self) -> bool:
        return self.failed_step is None


def hard(name: str, action: Callable[[], Any], pause_after: float = 0.0) -> Step:
    return Step(name=name, kind=StepKind.HARD, action=action, pause_after=pause_after)


def soft(name: str, action: Callable[[], Any], skip_reason: str | None = None) -> Step:
    return Step(name=name, kind=StepKind.SOFT, action=action, skip_reason=skip_reason)


class FanOutPipeline:
    """Runs steps one after another, pausing where a step asks for it."""

    def __init__(self, steps: list[Step], sleep: Callable[[float], None] = time.sleep):
        self.steps = steps
        self._sleep = sleep

    def run(self) -> PipelineResult:
        results: list[StepResult] = []

        for step in self.steps:
            result = self._run_step(step)
            results.append(result)

            if result.status == StepStatus.FAILED:
                logger.error("Fan-out halted", step=step.name, error=result.error)
                break

            if step.pause_after and result.status == StepStatus.COMPLETED:
                self._sleep(step.pause_after)

        return PipelineResult(steps=results)

    def _run_step(self, step: Step) -> StepResult:
        if step.skip_reason:
            logger.warning("Skipping step", step=step.name, reason=step.skip_reason)
            return StepResult(name=step.name, status=StepStatus.SKIPPED, error=step.skip_reason)

        try:
            outcome = step.action()
        except Exception as e:
            if step.kind == StepKind.HARD:
                return StepResult(name=step.name, status=StepStatus.FAILED, error=str(e))
            logger.error("Soft step raised, continuing", step=step.name, error=str(e))
            return StepResult(name=step.name, status=StepStatus.RECOVERED, error=str(e))

        if step.kind == StepKind.SOFT and not outcome:
            return StepResult(name=step.name, status=StepStatus.RECOVERED)

        return StepResult(name=step.name, status=StepStatus.COMPLETED)
