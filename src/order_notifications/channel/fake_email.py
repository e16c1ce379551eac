"""Fake email adapter — records sent emails for testing."""

from uuid import uuid4

from order_notifications.channel.email_port import EmailPort, EmailReceipt
from order_notifications.errors import EmailDeliveryError


class FakeEmailAdapter(EmailPort):
    """Email adapter that records messages in memory for test assertions."""

    def __init__(self):
        self.sent_emails: list[dict] = []
        self.fail_on_subjects: set[str] = set()
        self.failure_reason = "Email delivery failed"

    def configure(self, fail_on_subjects=(), failure_reason: str = "Email delivery failed"):
        """Make sends with the given subjects raise EmailDeliveryError."""
        self.fail_on_subjects = set(fail_on_subjects)
        self.failure_reason = failure_reason

    def send(
        self,
        to: str,
        subject: str,
        html_body: str,
        max_attempts: int = 3,
    ) -> EmailReceipt:
        if subject in self.fail_on_subjects:
            raise EmailDeliveryError(attempts=max_attempts, provider_message=self.failure_reason)

        message_id = f"email-{uuid4().hex[:12]}"
        self.sent_emails.append(
            {
                "message_id": message_id,
                "to": to,
                "subject": subject,
                "html_body": html_body,
            }
        )
        return EmailReceipt(message_id=message_id)

    def reset(self):
        """Clear sent emails (useful between tests)."""
        self.sent_emails.clear()
        self.fail_on_subjects = set()
        self.failure_reason = "Email delivery failed"
