"""Supabase order store — joins buyer, seller and product onto the order row."""

import structlog

from order_notifications.errors import FetchError
from order_notifications.order.order import OrderAggregate
from order_notifications.order.store import OrderStore
from order_notifications.supabase import SupabaseRestClient, SupabaseRestError

logger = structlog.get_logger(__name__)

ORDER_SELECT = (
    "*,"
    "buyer:profiles!buyer_id(email,full_name,phone_number),"
    "seller:sellers!seller_id(email,full_name,user_id),"
    "product:products!product_id(name,price)"
)


class SupabaseOrderStore(OrderStore):
    def __init__(self, rest: SupabaseRestClient):
        self._rest = rest

    def fetch(self, order_id: str) -> OrderAggregate:
        try:
            rows = self._rest.select("orders", ORDER_SELECT, id=order_id)
        except SupabaseRestError as exc:
            logger.error("Order query failed", order_id=order_id, error=str(exc))
            raise FetchError(f"Order query failed: {exc}") from exc

        if not rows:
            logger.error("Order not found", order_id=order_id)
            raise FetchError(f"Order not found: {order_id}")

        order = OrderAggregate.from_row(rows[0])
        logger.info("Order fetched", order_id=order_id, order_number=order.order_number)
        return order
