"""Notification recorder — best-effort insert of in-app notification rows."""

import structlog
from protean.domain import Domain

from order_notifications.domain import order_notifications
from order_notifications.errors import NotificationWriteError
from order_notifications.notification.notification import InAppNotification

logger = structlog.get_logger(__name__)


class NotificationRecorder:
    """Writes InAppNotification rows through the domain's repository.

    Failures never propagate: they are logged and reported as ``None`` so the
    fan-out can carry on with the remaining channels.
    """

    def __init__(self, domain: Domain = order_notifications):
        self._domain = domain

    def record(
        self,
        user_id: str,
        type: str,
        title: str,
        message: str,
        order_number: str | None = None,
        amount: float | None = None,
    ) -> InAppNotification | None:
        try:
            notification = self._write(user_id, type, title, message, order_number, amount)
        except Exception as e:
            logger.error(
                "In-app notification write failed",
                user_id=user_id,
                notification_type=type,
                order_number=order_number,
                error=str(e),
            )
            return None

        logger.info(
            "In-app notification created",
            notification_id=str(notification.id),
            user_id=user_id,
            notification_type=type,
            order_number=order_number,
        )
        return notification

    def _write(self, user_id, type, title, message, order_number, amount) -> InAppNotification:
        if not user_id:
            raise NotificationWriteError("user_id is required")

        with self._domain.domain_context():
            notification = InAppNotification.create(
                user_id=user_id,
                type=type,
                title=title,
                message=message,
                order_number=order_number,
                amount=amount,
            )
            self._domain.repository_for(InAppNotification).add(notification)
        return notification
