"""Channel adapters — pluggable email and push dispatch.

Fake adapters record messages in memory for tests; the Resend and FCM
adapters talk to the real providers.
"""

from order_notifications.channel.email_port import EmailPort, EmailReceipt
from order_notifications.channel.push_port import PushPort

__all__ = ["EmailPort", "EmailReceipt", "PushPort"]
