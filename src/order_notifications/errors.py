"""Error taxonomy for the order notification fan-out.

Fetch and email errors are fatal to an invocation. Push and in-app
notification errors are recovered inside their channel and only logged.
"""


class NotificationError(Exception):
    """Base class for all order notification errors."""


class ConfigurationError(NotificationError):
    """Required settings are missing or malformed."""


class FetchError(NotificationError):
    """The order aggregate could not be loaded from the order store."""


class OrderValidationError(FetchError):
    """The order store returned a row that does not match the aggregate schema."""


class EmailDeliveryError(NotificationError):
    """The email provider rejected the message or retries were exhausted."""

    def __init__(self, attempts: int, provider_message: str, status_code: int | None = None):
        self.attempts = attempts
        self.provider_message = provider_message
        self.status_code = status_code
        super().__init__(f"Failed to send email after {attempts} attempts: {provider_message}")


class PushError(NotificationError):
    """Token exchange, device lookup or the push gateway failed."""


class NotificationWriteError(NotificationError):
    """The in-app notification row could not be written."""
