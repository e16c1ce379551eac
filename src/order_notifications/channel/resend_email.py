"""Resend email adapter — HTTP delivery with bounded exponential backoff.

Only rate limiting (HTTP 429) is retried. The wait before attempt ``k + 1``
is ``base × 2^(k-1)`` milliseconds plus a uniform jitter in ``[0, jitter)``.
Any other non-2xx response, a transport error, or running out of attempts
raises ``EmailDeliveryError``.
"""

import random
import time
from collections.abc import Callable

import httpx
import structlog
from tenacity import RetryCallState, Retrying, retry_if_result, stop_after_attempt, wait_exponential

from order_notifications.channel.email_port import EmailPort, EmailReceipt
from order_notifications.errors import EmailDeliveryError

logger = structlog.get_logger(__name__)

RATE_LIMITED = 429


def backoff_wait(
    base_ms: int = 500,
    jitter_ms: int = 100,
    rng: Callable[[], float] = random.random,
):
    """Tenacity wait strategy: ``base × 2^(k-1)`` ms after attempt k, plus jitter."""

    def jitter(retry_state: RetryCallState) -> float:
        return rng() * jitter_ms / 1000

    return wait_exponential(multiplier=base_ms / 1000) + jitter


def _is_rate_limited(response: httpx.Response) -> bool:
    return response.status_code == RATE_LIMITED


def _log_retry(retry_state: RetryCallState) -> None:
    logger.warning(
        "Email provider rate limited, retrying",
        attempt=retry_state.attempt_number,
        wait_ms=round(retry_state.next_action.sleep * 1000),
    )


class ResendEmailAdapter(EmailPort):
    """Sends HTML email through the Resend HTTP API."""

    def __init__(
        self,
        client: httpx.Client,
        api_key: str,
        sender: str,
        api_url: str = "https://api.resend.com/emails",
        sandbox_recipient: str | None = None,
        backoff_base_ms: int = 500,
        backoff_jitter_ms: int = 100,
        sleep: Callable[[float], None] = time.sleep,
        rng: Callable[[], float] = random.random,
    ):
        self._client = client
        self._api_key = api_key
        self._sender = sender
        self._api_url = api_url
        self._sandbox_recipient = sandbox_recipient
        self._wait = backoff_wait(backoff_base_ms, backoff_jitter_ms, rng)
        self._sleep = sleep

    def send(
        self,
        to: str,
        subject: str,
        html_body: str,
        max_attempts: int = 3,
    ) -> EmailReceipt:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        recipient = to
        if self._sandbox_recipient:
            logger.info(
                "Redirecting email to sandbox recipient",
                intended_recipient=to,
                sandbox_recipient=self._sandbox_recipient,
            )
            recipient = self._sandbox_recipient

        payload = {
            "from": self._sender,
            "to": [recipient],
            "subject": subject,
            "html": html_body,
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}
        attempts = 0

        def post() -> httpx.Response:
            nonlocal attempts
            attempts += 1
            logger.info("Sending email", subject=subject, attempt=attempts)
            try:
                return self._client.post(self._api_url, json=payload, headers=headers)
            except httpx.HTTPError as exc:
                logger.error("Email transport error", subject=subject, attempt=attempts, error=str(exc))
                raise EmailDeliveryError(attempts=attempts, provider_message=str(exc)) from exc

        retrying = Retrying(
            stop=stop_after_attempt(max_attempts),
            wait=self._wait,
            retry=retry_if_result(_is_rate_limited),
            sleep=self._sleep,
            before_sleep=_log_retry,
            # Hand back the last 429 once attempts run out
            retry_error_callback=lambda retry_state: retry_state.outcome.result(),
        )
        response = retrying(post)

        if response.is_success:
            message_id = _message_id(response)
            logger.info("Email sent", subject=subject, message_id=message_id, attempts=attempts)
            return EmailReceipt(message_id=message_id, attempts=attempts)

        error_message = _provider_error_message(response)
        logger.error(
            "Email provider rejected message",
            subject=subject,
            status_code=response.status_code,
            attempts=attempts,
            error=error_message,
        )
        raise EmailDeliveryError(
            attempts=attempts,
            provider_message=error_message,
            status_code=response.status_code,
        )


def _message_id(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("id")
    return None


def _provider_error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"Failed to parse error response. Status: {response.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"Failed to parse error response. Status: {response.status_code}"
