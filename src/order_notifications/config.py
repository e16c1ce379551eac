"""Runtime settings, built once at startup and passed to every component."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from order_notifications.errors import ConfigurationError

_REQUIRED = {
    "RESEND_API_KEY": "email_api_key",
    "SUPABASE_URL": "supabase_url",
    "SUPABASE_SERVICE_ROLE_KEY": "supabase_service_key",
}

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class BrandSettings:
    """Marketplace branding used by email templates and push copy."""

    name: str = "UniHub"
    color: str = "#4A90E2"
    logo_url: str = "https://your-logo-url.com/logo.png"
    seller_dashboard_url: str = "https://sellers.unihub.com"
    currency_symbol: str = "₦"
    location: str = "Lagos, Nigeria"
    copyright_year: int = 2025


@dataclass(frozen=True)
class NotificationSettings:
    email_api_key: str
    supabase_url: str
    supabase_service_key: str
    push_service_account_json: str | None = None

    email_api_url: str = "https://api.resend.com/emails"
    email_from: str = "UniHub <onboarding@resend.dev>"
    email_sandbox_recipient: str | None = None
    email_max_attempts: int = 3
    email_backoff_base_ms: int = 500
    email_backoff_jitter_ms: int = 100
    email_spacing_ms: int = 500

    push_gateway_url: str = "https://fcm.googleapis.com/v1/projects/{project_id}/messages:send"
    push_screen_route: str = "/orders"

    http_timeout_seconds: float = 10.0
    log_level: str = "INFO"
    log_json: bool = False

    brand: BrandSettings = field(default_factory=BrandSettings)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "NotificationSettings":
        """Build settings from environment variables.

        Raises:
            ConfigurationError: if any required variable is missing or a
                numeric variable cannot be parsed.
        """
        env = os.environ if environ is None else environ

        missing = [name for name in _REQUIRED if not env.get(name)]
        if missing:
            raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

        brand = BrandSettings(
            logo_url=env.get("BRAND_LOGO_URL", BrandSettings.logo_url),
            seller_dashboard_url=env.get("SELLER_DASHBOARD_URL", BrandSettings.seller_dashboard_url),
        )

        try:
            return cls(
                email_api_key=env["RESEND_API_KEY"],
                supabase_url=env["SUPABASE_URL"].rstrip("/"),
                supabase_service_key=env["SUPABASE_SERVICE_ROLE_KEY"],
                push_service_account_json=env.get("FCM_SERVICE_ACCOUNT_JSON") or None,
                email_from=env.get("EMAIL_FROM", cls.email_from),
                email_sandbox_recipient=env.get("EMAIL_SANDBOX_RECIPIENT") or None,
                email_max_attempts=int(env.get("EMAIL_MAX_ATTEMPTS", cls.email_max_attempts)),
                email_spacing_ms=int(env.get("EMAIL_SPACING_MS", cls.email_spacing_ms)),
                http_timeout_seconds=float(env.get("HTTP_TIMEOUT_SECONDS", cls.http_timeout_seconds)),
                log_level=env.get("LOG_LEVEL", cls.log_level).upper(),
                log_json=env.get("LOG_JSON", "").lower() in _TRUTHY,
                brand=brand,
            )
        except ValueError as exc:
            raise ConfigurationError(f"Invalid numeric setting: {exc}") from exc
