"""Fan-out plans — the fixed, ordered steps for each kind of order event."""

from enum import Enum
from functools import partial

from order_notifications.channel.email_port import EmailPort
from order_notifications.channel.push_port import PushPort
from order_notifications.config import NotificationSettings
from order_notifications.notification.notification import InAppNotificationType
from order_notifications.notification.recorder import NotificationRecorder
from order_notifications.order.order import ChangeEventType, OrderAggregate, OrderStatus
from order_notifications.orchestration.pipeline import Step, hard, soft
from order_notifications.templates import EmailScenario, render_email


class OrderEventKind(Enum):
    PLACED = "order_placed"
    CANCELLED = "order_cancelled"
    IGNORED = "ignored"


def classify_event(event_type: str, order_status: str | None) -> OrderEventKind:
    """INSERT is a placement, UPDATE to ``cancelled`` is a cancellation."""
    if event_type == ChangeEventType.INSERT.value:
        return OrderEventKind.PLACED
    if event_type == ChangeEventType.UPDATE.value and order_status == OrderStatus.CANCELLED.value:
        return OrderEventKind.CANCELLED
    return OrderEventKind.IGNORED


class FanOutPlanner:
    def __init__(
        self,
        email: EmailPort,
        push: PushPort,
        recorder: NotificationRecorder,
        settings: NotificationSettings,
    ):
        self._email = email
        self._push = push
        self._recorder = recorder
        self._settings = settings

    def plan(self, kind: OrderEventKind, order: OrderAggregate) -> list[Step]:
        if kind == OrderEventKind.PLACED:
            return self.order_placed(order)
        if kind == OrderEventKind.CANCELLED:
            return self.order_cancelled(order)
        return []

    def order_placed(self, order: OrderAggregate) -> list[Step]:
        buyer_id = order.buyer.user_id
        seller_id = order.seller.user_id
        number = order.order_number
        product = order.product.name
        total = self._money(order.total_amount)

        steps = [
            self._email_step("email_buyer_order_confirmed", order.buyer.email, EmailScenario.BUYER_ORDER_PLACED, order, pause=True),
            self._email_step("email_seller_new_order", order.seller.email, EmailScenario.SELLER_ORDER_PLACED, order),
            soft(
                "record_seller_new_order",
                partial(
                    self._recorder.record,
                    seller_id,
                    InAppNotificationType.ORDER_PLACED.value,
                    "New Order Received! 🛍️",
                    f"You have a new order #{number} for {product} ({total})",
                    number,
                    order.total_amount,
                ),
                skip_reason=None if seller_id else "seller user_id not found",
            ),
            self._push_step(
                "push_seller_new_order",
                seller_id,
                "New Order Received! 🛍️",
                f"You have a new order #{number} for {product}",
                order,
                skip_reason=None if seller_id else "seller user_id not found",
            ),
            self._push_step(
                "push_buyer_order_confirmed",
                buyer_id,
                "Order Confirmed! ✅",
                f"Your order #{number} for {product} has been confirmed.",
                order,
                skip_reason=None if buyer_id else "buyer user_id not found",
            ),
        ]

        if not order.is_pay_on_delivery:
            escrow = self._money(order.escrow_amount)
            steps.append(
                self._push_step(
                    "push_buyer_payment_secured",
                    buyer_id,
                    "Payment Secured 🔒",
                    f"{escrow} is held securely in escrow for order #{number}",
                    order,
                    skip_reason=None if buyer_id else "buyer user_id not found",
                )
            )

        return steps

    def order_cancelled(self, order: OrderAggregate) -> list[Step]:
        # In-app records are only written for placements.
        buyer_id = order.buyer.user_id
        seller_id = order.seller.user_id
        body = f"Your order #{order.order_number} for {order.product.name} has been cancelled."

        return [
            self._email_step("email_buyer_order_cancelled", order.buyer.email, EmailScenario.BUYER_ORDER_CANCELLED, order, pause=True),
            self._email_step("email_seller_order_cancelled", order.seller.email, EmailScenario.SELLER_ORDER_CANCELLED, order),
            self._push_step(
                "push_seller_order_cancelled",
                seller_id,
                "Order Cancelled",
                body,
                order,
                skip_reason=None if seller_id else "seller user_id not found",
            ),
            self._push_step(
                "push_buyer_order_cancelled",
                buyer_id,
                "Order Cancelled",
                body,
                order,
                skip_reason=None if buyer_id else "buyer user_id not found",
            ),
        ]

    def _email_step(self, name, to, scenario, order, pause=False) -> Step:
        def send():
            rendered = render_email(scenario, order, self._settings.brand)
            return self._email.send(
                to,
                rendered["subject"],
                rendered["html"],
                max_attempts=self._settings.email_max_attempts,
            )

        pause_after = self._settings.email_spacing_ms / 1000 if pause else 0.0
        return hard(name, send, pause_after=pause_after)

    def _push_step(self, name, user_id, title, body, order, skip_reason=None) -> Step:
        return soft(
            name,
            partial(self._push.send_push, user_id, title, body, order.id, order.product.name),
            skip_reason=skip_reason,
        )

    def _money(self, amount: float | None) -> str:
        return f"{self._settings.brand.currency_symbol}{(amount or 0):.0f}"
