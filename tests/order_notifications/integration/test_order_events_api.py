"""Integration tests for the order events webhook endpoint."""

import httpx
from fastapi import FastAPI
from fastapi.testclient import TestClient
from order_notifications.api.routes import router
from order_notifications.bootstrap import build_orchestrator


def _get_test_client(orchestrator):
    """Build a minimal FastAPI test client with the order events route."""
    app = FastAPI()
    app.include_router(router)
    app.state.orchestrator = orchestrator
    return TestClient(app)


class TestOrderEventsAPI:
    def test_insert_returns_success(self, fanout, order_factory):
        fanout.store.add(order_factory())
        client = _get_test_client(fanout.orchestrator)

        resp = client.post("/order-emails", json={"type": "INSERT", "table": "orders", "record": {"id": "ord-1"}})

        assert resp.status_code == 200
        assert resp.json() == {"success": True}
        assert [e["subject"] for e in fanout.email.sent_emails] == [
            "Order Confirmed - UH-1001",
            "New Order - UH-1001",
        ]

    def test_update_shipped_is_noop_success(self, fanout, order_factory):
        fanout.store.add(order_factory(order_status="shipped"))
        client = _get_test_client(fanout.orchestrator)

        resp = client.post("/order-emails", json={"type": "UPDATE", "record": {"id": "ord-1", "order_status": "shipped"}})

        assert resp.status_code == 200
        assert resp.json() == {"success": True}
        assert fanout.email.sent_emails == []
        assert fanout.push.sent_pushes == []

    def test_order_not_found_returns_500(self, fanout):
        client = _get_test_client(fanout.orchestrator)

        resp = client.post("/order-emails", json={"type": "INSERT", "record": {"id": "nope-404"}})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Order not found: nope-404"}

    def test_email_failure_returns_500(self, fanout, order_factory):
        fanout.store.add(order_factory(order_status="cancelled"))
        fanout.email.configure(fail_on_subjects={"Order Cancelled - UH-1001"}, failure_reason="Invalid API key")
        client = _get_test_client(fanout.orchestrator)

        resp = client.post("/order-emails", json={"type": "UPDATE", "record": {"id": "ord-1"}})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to send email after 3 attempts: Invalid API key"}

    def test_numeric_record_id_accepted(self, fanout, order_factory):
        fanout.store.add(order_factory(id=77))
        client = _get_test_client(fanout.orchestrator)

        resp = client.post("/order-emails", json={"type": "INSERT", "record": {"id": 77}})

        assert resp.status_code == 200
        assert fanout.store.fetched_ids == ["77"]

    def test_missing_record_is_rejected(self, fanout):
        client = _get_test_client(fanout.orchestrator)

        resp = client.post("/order-emails", json={"type": "INSERT"})

        assert resp.status_code == 422
        assert fanout.store.fetched_ids == []


class _CrashingOrchestrator:
    def handle(self, event):
        raise RuntimeError(f"orchestrator crashed on {event.record.id}")


class TestUnexpectedFailures:
    def test_store_crash_returns_json_error(self, fanout, monkeypatch):
        def crash(order_id):
            raise KeyError("buyer")

        monkeypatch.setattr(fanout.store, "fetch", crash)
        client = _get_test_client(fanout.orchestrator)

        resp = client.post("/order-emails", json={"type": "INSERT", "record": {"id": "ord-1"}})

        assert resp.status_code == 500
        assert resp.json() == {"error": "'buyer'"}
        assert fanout.email.sent_emails == []

    def test_orchestrator_crash_returns_json_error(self):
        client = _get_test_client(_CrashingOrchestrator())

        resp = client.post("/order-emails", json={"type": "INSERT", "record": {"id": "ord-1"}})

        assert resp.status_code == 500
        assert resp.json() == {"error": "orchestrator crashed on ord-1"}

    def test_non_json_database_response_returns_json_error(self, settings_factory):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>gateway</html>"))
        orchestrator = build_orchestrator(settings_factory(), httpx.Client(transport=transport), sleep=lambda s: None)
        client = _get_test_client(orchestrator)

        resp = client.post("/order-emails", json={"type": "INSERT", "record": {"id": "ord-1"}})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Order query failed: Unparseable response body (HTTP 200)"}
