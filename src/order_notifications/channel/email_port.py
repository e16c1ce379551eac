"""Email channel port — abstract interface for transactional email dispatch."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class EmailReceipt:
    """Provider acknowledgement of an accepted email."""

    message_id: str | None
    attempts: int = 1


class EmailPort(ABC):
    """Abstract interface for email dispatch adapters."""

    @abstractmethod
    def send(
        self,
        to: str,
        subject: str,
        html_body: str,
        max_attempts: int = 3,
    ) -> EmailReceipt:
        """Send an HTML email.

        Raises:
            EmailDeliveryError: the provider rejected the message or retries
                were exhausted.
        """
        ...
