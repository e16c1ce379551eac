"""Push notification channel port — abstract interface for push dispatch."""

from abc import ABC, abstractmethod


class PushPort(ABC):
    """Abstract interface for push notification dispatch adapters.

    Push is a best-effort channel: implementations must never raise to the
    caller.
    """

    @abstractmethod
    def send_push(
        self,
        user_id: str,
        title: str,
        body: str,
        order_id: str,
        product_name: str,
    ) -> bool:
        """Send a push notification to every device of ``user_id``.

        Returns:
            True when the gateway accepted the message, False otherwise.
        """
        ...
