"""Credentials for the push gateway: service-account bearer tokens and
per-user device tokens."""

import json
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass

import google.auth.transport.requests
from google.oauth2 import service_account

from order_notifications.errors import PushError
from order_notifications.supabase import SupabaseRestClient, SupabaseRestError

FIREBASE_MESSAGING_SCOPE = "https://www.googleapis.com/auth/firebase.messaging"


@dataclass(frozen=True)
class AccessToken:
    token: str
    project_id: str


class AccessTokenProvider(ABC):
    @abstractmethod
    def access_token(self) -> AccessToken:
        """Return a bearer token and the project it is scoped to.

        Raises:
            PushError: credentials are missing or the exchange failed.
        """
        ...


class ServiceAccountTokenProvider(AccessTokenProvider):
    """Exchanges a Google service-account JSON blob for an FCM access token.

    The credentials are parsed once and the token is only refreshed when it
    has expired.
    """

    def __init__(self, service_account_json: str | None, request_factory=google.auth.transport.requests.Request):
        self._service_account_json = service_account_json
        self._request_factory = request_factory
        self._credentials = None
        self._project_id = None
        self._lock = threading.Lock()

    def access_token(self) -> AccessToken:
        with self._lock:
            if self._credentials is None:
                self._credentials, self._project_id = self._load_credentials()
            if not self._credentials.valid:
                self._credentials.refresh(self._request_factory())
            return AccessToken(token=self._credentials.token, project_id=self._project_id)

    def _load_credentials(self):
        if not self._service_account_json:
            raise PushError("FCM_SERVICE_ACCOUNT_JSON is not configured")

        try:
            info = json.loads(self._service_account_json)
        except ValueError as exc:
            raise PushError(f"Service account JSON is malformed: {exc}") from exc

        project_id = info.get("project_id")
        if not project_id:
            raise PushError("Service account JSON has no project_id")

        credentials = service_account.Credentials.from_service_account_info(
            info,
            scopes=[FIREBASE_MESSAGING_SCOPE],
        )
        return credentials, project_id


class DeviceTokenResolver(ABC):
    @abstractmethod
    def token_for(self, user_id: str) -> str | None:
        """Return the registered device token for a user, or None."""
        ...


class SupabaseDeviceTokens(DeviceTokenResolver):
    """Reads the device token the mobile app stores on the user's profile."""

    def __init__(self, rest: SupabaseRestClient, table: str = "profiles", column: str = "fcm_token"):
        self._rest = rest
        self._table = table
        self._column = column

    def token_for(self, user_id: str) -> str | None:
        try:
            rows = self._rest.select(self._table, self._column, id=user_id)
        except SupabaseRestError as exc:
            raise PushError(f"Device token lookup failed: {exc}") from exc
        if not rows:
            return None
        return rows[0].get(self._column) or None
