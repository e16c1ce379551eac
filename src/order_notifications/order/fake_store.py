"""Fake order store — serves orders from memory for testing."""

from order_notifications.errors import FetchError
from order_notifications.order.order import OrderAggregate
from order_notifications.order.store import OrderStore


class FakeOrderStore(OrderStore):
    """Order store that returns pre-seeded aggregates and records lookups."""

    def __init__(self, orders: list[OrderAggregate] | None = None):
        self.orders: dict[str, OrderAggregate] = {o.id: o for o in orders or []}
        self.fetched_ids: list[str] = []
        self.failure_reason: str | None = None

    def configure(self, failure_reason: str | None = None):
        """Make every fetch fail with the given query error."""
        self.failure_reason = failure_reason

    def add(self, order: OrderAggregate) -> None:
        self.orders[order.id] = order

    def fetch(self, order_id: str) -> OrderAggregate:
        self.fetched_ids.append(order_id)
        if self.failure_reason:
            raise FetchError(f"Order query failed: {self.failure_reason}")
        try:
            return self.orders[order_id]
        except KeyError:
            raise FetchError(f"Order not found: {order_id}") from None
