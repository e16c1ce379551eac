"""UniHub order notifications FastAPI application.

Receives order change events from the database webhook and fans out emails,
in-app notifications and push alerts.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from order_notifications.api.routes import router as order_events_router
from order_notifications.bootstrap import build_http_client, build_orchestrator
from order_notifications.config import NotificationSettings
from order_notifications.domain import order_notifications
from order_notifications.utils.logging import configure_logging

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the config overlay in domain.toml:
#   - unset / "test" → in-memory notification store
#   - "production"   → PostgreSQL notification store (DATABASE_URL)
order_notifications.init()


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = NotificationSettings.from_env()
    configure_logging(settings.log_level, json=settings.log_json)

    with build_http_client(settings) as client:
        app.state.orchestrator = build_orchestrator(settings, client)
        yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="UniHub Order Notifications",
    description="Order placed / cancelled fan-out — email, in-app and push",
    lifespan=lifespan,
)

app.include_router(order_events_router)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": order_notifications.name})
