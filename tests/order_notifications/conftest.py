from dataclasses import dataclass, field

import pytest
from protean.integrations.pytest import DomainFixture

from order_notifications.channel.fake_email import FakeEmailAdapter
from order_notifications.channel.fake_push import FakePushAdapter
from order_notifications.config import NotificationSettings
from order_notifications.notification.recorder import NotificationRecorder
from order_notifications.order.fake_store import FakeOrderStore
from order_notifications.order.order import OrderAggregate
from order_notifications.orchestration import FanOutPlanner, OrderEventOrchestrator


@pytest.fixture(scope="session")
def order_notifications_bed():
    from order_notifications.domain import order_notifications
    from order_notifications.notification.notification import InAppNotification  # noqa: F401
    from order_notifications.utils.db import drop_db, setup_db

    bed = DomainFixture(order_notifications)
    bed.setup()
    setup_db(order_notifications)
    yield bed
    drop_db(order_notifications)
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(order_notifications_bed):
    with order_notifications_bed.domain_context():
        yield

    from order_notifications.domain import order_notifications

    for _, provider in order_notifications.providers.items():
        provider._data_reset()


def make_settings(**overrides) -> NotificationSettings:
    defaults = {
        "email_api_key": "re_test_key",
        "supabase_url": "https://project.supabase.co",
        "supabase_service_key": "service-role-key",
        "email_spacing_ms": 500,
    }
    defaults.update(overrides)
    return NotificationSettings(**defaults)


def make_order_row(**overrides) -> dict:
    """A joined order row shaped like the order store's response."""
    row = {
        "id": "ord-1",
        "order_number": "UH-1001",
        "total_amount": 15000,
        "escrow_amount": 15000,
        "payment_method": "card",
        "payment_status": "paid",
        "order_status": "pending",
        "delivery_code": "482913",
        "buyer_id": "B1",
        "seller_id": "seller-row-1",
        "product_id": "prod-1",
        "buyer": {
            "email": "ada@student.unihub.ng",
            "full_name": "Ada Obi",
            "phone_number": "+2348012345678",
        },
        "seller": {
            "email": "tunde@shop.unihub.ng",
            "full_name": "Tunde Bello",
            "user_id": "S1",
        },
        "product": {"name": "Calculus Textbook", "price": 15000},
    }
    row.update(overrides)
    return row


def make_order(**overrides) -> OrderAggregate:
    return OrderAggregate.from_row(make_order_row(**overrides))


@dataclass
class FanOutHarness:
    store: FakeOrderStore
    email: FakeEmailAdapter
    push: FakePushAdapter
    recorder: NotificationRecorder
    orchestrator: OrderEventOrchestrator
    sleeps: list = field(default_factory=list)


@pytest.fixture
def fanout():
    """Orchestrator wired to fake store/email/push and the in-memory recorder."""
    sleeps = []
    store = FakeOrderStore()
    email = FakeEmailAdapter()
    push = FakePushAdapter()
    recorder = NotificationRecorder()
    planner = FanOutPlanner(email=email, push=push, recorder=recorder, settings=make_settings())
    orchestrator = OrderEventOrchestrator(store, planner, sleep=sleeps.append)
    return FanOutHarness(
        store=store,
        email=email,
        push=push,
        recorder=recorder,
        orchestrator=orchestrator,
        sleeps=sleeps,
    )


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def order_row_factory():
    return make_order_row


@pytest.fixture
def order_factory():
    return make_order
