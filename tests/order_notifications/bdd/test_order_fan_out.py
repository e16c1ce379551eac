"""BDD tests for the order notification fan-out."""

from order_notifications.order.order import ChangeEvent
from pytest_bdd import parsers, scenarios, when

scenarios("features/order_fan_out.feature")


@when(parsers.cfparse('a "{event_type}" event arrives for the order'))
def event_arrives(fanout, order_factory, context, event_type):
    order = order_factory(**context["overrides"])
    fanout.store.add(order)
    event = ChangeEvent.model_validate({"type": event_type, "record": {"id": order.id}})
    context["result"] = fanout.orchestrator.handle(event)
