"""In-app notification aggregate — rows the mobile app lists in its inbox.

The ``notifications`` table is read (and marked read or deleted) by the app;
this context only ever inserts new unread rows.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Boolean, DateTime, Float, Identifier, String, Text

from order_notifications.domain import order_notifications


class InAppNotificationType(Enum):
    ORDER_PLACED = "order_placed"
    ORDER_CANCELLED = "order_cancelled"
    PAYMENT_SECURED = "payment_secured"


@order_notifications.aggregate(schema_name="notifications")
class InAppNotification:
    """A single unread notification shown to a marketplace user."""

    user_id: Identifier(required=True)
    type: String(choices=InAppNotificationType, required=True)
    title: String(max_length=200, required=True)
    message: Text(required=True)
    order_number: String(max_length=100)
    amount: Float()
    is_read: Boolean(default=False)
    created_at: DateTime()

    @classmethod
    def create(cls, user_id, type, title, message, order_number=None, amount=None):
        """Create a new unread notification. A zero amount is stored as null."""
        return cls(
            user_id=user_id,
            type=type,
            title=title,
            message=message,
            order_number=order_number,
            amount=amount or None,
            is_read=False,
            created_at=datetime.now(UTC),
        )
