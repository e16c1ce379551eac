"""Order event orchestrator — entry point of the notification fan-out.

Fetches the order aggregate for a change event, classifies the event and
runs the matching fan-out plan. Only fetch and email failures fail the
invocation; push and in-app notification failures are absorbed by their
channels.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

import structlog

from order_notifications.errors import FetchError
from order_notifications.order.order import ChangeEvent
from order_notifications.order.store import OrderStore
from order_notifications.orchestration.pipeline import FanOutPipeline, StepResult
from order_notifications.orchestration.plans import FanOutPlanner, OrderEventKind, classify_event

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class InvocationResult:
    success: bool
    error: str | None = None
    kind: OrderEventKind | None = None
    steps: list[StepResult] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, kind: OrderEventKind | None = None, steps=None) -> "InvocationResult":
        return cls(success=False, error=error, kind=kind, steps=list(steps or []))


class OrderEventOrchestrator:
    def __init__(
        self,
        store: OrderStore,
        planner: FanOutPlanner,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._store = store
        self._planner = planner
        self._sleep = sleep

    def handle(self, event: ChangeEvent) -> InvocationResult:
        order_id = event.record.id
        log = logger.bind(event_type=event.type, order_id=order_id)
        log.info("Order event received")

        try:
            order = self._store.fetch(order_id)
        except FetchError as e:
            log.error("Order fetch failed", error=str(e))
            return InvocationResult.failure(str(e))
        except Exception as e:
            log.exception("Unexpected error fetching order", error=str(e))
            return InvocationResult.failure(str(e))

        kind = classify_event(event.type, order.order_status)
        if kind == OrderEventKind.IGNORED:
            log.info("No action taken for event", order_status=order.order_status)
            return InvocationResult(success=True, kind=kind)

        log.info("Fanning out order notifications", kind=kind.value, order_number=order.order_number)
        result = FanOutPipeline(self._planner.plan(kind, order), sleep=self._sleep).run()

        if not result.succeeded:
            return InvocationResult.failure(result.failed_step.error, kind=kind, steps=result.steps)

        log.info(
            "Order notifications completed",
            kind=kind.value,
            steps={step.name: step.status.value for step in result.steps},
        )
        return InvocationResult(success=True, kind=kind, steps=result.steps)
