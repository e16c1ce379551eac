"""Shared BDD fixtures and step definitions for the order fan-out."""

import pytest
from order_notifications.notification.notification import InAppNotification
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def context():
    """Container for the order under test and the invocation result."""
    return {"overrides": {}, "result": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('an order "{number}" paid by "{method}" with buyer "{buyer}" and seller "{seller}"'))
def an_order(context, number, method, buyer, seller):
    context["overrides"].update(
        order_number=number,
        payment_method=method,
        buyer_id=buyer,
        seller={"email": "tunde@shop.unihub.ng", "full_name": "Tunde Bello", "user_id": seller},
    )


@given(parsers.cfparse('the order status is "{status}"'))
def order_status(context, status):
    context["overrides"]["order_status"] = status


@given("the push gateway is down")
def push_down(fanout):
    fanout.push.configure(should_succeed=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the invocation succeeds")
def invocation_succeeds(context):
    assert context["result"].success is True


@then(parsers.cfparse("{count:d} emails are sent"))
def emails_sent(fanout, count):
    assert len(fanout.email.sent_emails) == count


@then(parsers.cfparse('the email subjects are "{first}" then "{second}"'))
def email_subjects(fanout, first, second):
    assert [e["subject"] for e in fanout.email.sent_emails] == [first, second]


@then(parsers.cfparse("{count:d} pushes are sent"))
def pushes_sent(fanout, count):
    assert len(fanout.push.sent_pushes) == count


@then(parsers.cfparse('no push is titled "{title}"'))
def no_push_titled(fanout, title):
    assert title not in [p["title"] for p in fanout.push.sent_pushes]


@then(parsers.cfparse('1 in-app notification is recorded for "{user_id}"'))
def one_record(user_id):
    records = current_domain.repository_for(InAppNotification)._dao.query.all().items
    assert [str(r.user_id) for r in records] == [user_id]


@then("no in-app notification is recorded")
def no_records():
    assert current_domain.repository_for(InAppNotification)._dao.query.all().items == []
