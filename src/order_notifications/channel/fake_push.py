"""Fake push notification adapter — records sent pushes for testing."""

from order_notifications.channel.push_port import PushPort


class FakePushAdapter(PushPort):
    """Push adapter that records notifications in memory for test assertions."""

    def __init__(self):
        self.sent_pushes: list[dict] = []
        self.should_succeed = True

    def configure(self, should_succeed: bool = True):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed

    def send_push(
        self,
        user_id: str,
        title: str,
        body: str,
        order_id: str,
        product_name: str,
    ) -> bool:
        self.sent_pushes.append(
            {
                "user_id": user_id,
                "title": title,
                "body": body,
                "order_id": order_id,
                "product_name": product_name,
            }
        )
        return self.should_succeed

    def reset(self):
        """Clear sent pushes (useful between tests)."""
        self.sent_pushes.clear()
        self.should_succeed = True
