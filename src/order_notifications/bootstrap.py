"""Wires settings, HTTP adapters and the orchestrator together."""

import time
from collections.abc import Callable

import httpx

from order_notifications.channel.fcm_push import FcmPushAdapter
from order_notifications.channel.push_credentials import ServiceAccountTokenProvider, SupabaseDeviceTokens
from order_notifications.channel.resend_email import ResendEmailAdapter
from order_notifications.config import NotificationSettings
from order_notifications.notification.recorder import NotificationRecorder
from order_notifications.order.supabase_store import SupabaseOrderStore
from order_notifications.orchestration import FanOutPlanner, OrderEventOrchestrator
from order_notifications.supabase import SupabaseRestClient


def build_http_client(settings: NotificationSettings) -> httpx.Client:
    return httpx.Client(timeout=settings.http_timeout_seconds)


def build_orchestrator(
    settings: NotificationSettings,
    client: httpx.Client,
    sleep: Callable[[float], None] = time.sleep,
) -> OrderEventOrchestrator:
    """Build the production orchestrator on a shared HTTP client."""
    rest = SupabaseRestClient(client, settings.supabase_url, settings.supabase_service_key)

    email = ResendEmailAdapter(
        client,
        api_key=settings.email_api_key,
        sender=settings.email_from,
        api_url=settings.email_api_url,
        sandbox_recipient=settings.email_sandbox_recipient,
        backoff_base_ms=settings.email_backoff_base_ms,
        backoff_jitter_ms=settings.email_backoff_jitter_ms,
        sleep=sleep,
    )
    push = FcmPushAdapter(
        client,
        token_provider=ServiceAccountTokenProvider(settings.push_service_account_json),
        device_tokens=SupabaseDeviceTokens(rest),
        screen_route=settings.push_screen_route,
        send_url=settings.push_gateway_url,
    )
    planner = FanOutPlanner(email=email, push=push, recorder=NotificationRecorder(), settings=settings)

    return OrderEventOrchestrator(SupabaseOrderStore(rest), planner, sleep=sleep)
