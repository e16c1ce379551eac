"""Thin PostgREST client for the marketplace's Supabase database."""

from typing import Any

import httpx
import structlog

logger = structlog.get_logger(__name__)


class SupabaseRestError(Exception):
    """A PostgREST request failed at the transport or HTTP level."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class SupabaseRestClient:
    """Issues read queries against ``<url>/rest/v1`` with the service role key."""

    def __init__(self, client: httpx.Client, base_url: str, service_key: str):
        self._client = client
        self._base_url = f"{base_url.rstrip('/')}/rest/v1"
        self._headers = {
            "apikey": service_key,
            "Authorization": f"Bearer {service_key}",
            "Accept": "application/json",
        }

    def select(self, table: str, select: str, **filters: str) -> list[dict[str, Any]]:
        """Run ``GET /<table>?select=...&<column>=eq.<value>`` and return the rows."""
        params = {"select": select}
        params.update({column: f"eq.{value}" for column, value in filters.items()})

        try:
            response = self._client.get(
                f"{self._base_url}/{table}",
                params=params,
                headers=self._headers,
            )
        except httpx.HTTPError as exc:
            raise SupabaseRestError(f"{type(exc).__name__}: {exc}") from exc

        if not response.is_success:
            raise SupabaseRestError(_error_message(response), status_code=response.status_code)

        try:
            rows = response.json()
        except ValueError as exc:
            raise SupabaseRestError(
                f"Unparseable response body (HTTP {response.status_code})", status_code=response.status_code
            ) from exc
        if not isinstance(rows, list):
            raise SupabaseRestError(
                f"Expected a list of rows, got {type(rows).__name__}", status_code=response.status_code
            )

        logger.debug("Supabase query completed", table=table, rows=len(rows))
        return rows


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {response.status_code}"
