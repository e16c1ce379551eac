from order_notifications.orchestration.orchestrator import InvocationResult, OrderEventOrchestrator
from order_notifications.orchestration.plans import FanOutPlanner, OrderEventKind, classify_event

__all__ = [
    "FanOutPlanner",
    "InvocationResult",
    "OrderEventKind",
    "OrderEventOrchestrator",
    "classify_event",
]
