"""Shared BDD fixtures and step definitions for the Notifications domain."""

import pytest
from notifications.notification.notification import Notification
from protean import current_domain
from pytest_bdd import parsers, then


@pytest.fixture()
def outcomes():
    """Container for delivery outcomes produced in When steps."""
    return {}


def _unread(user_id):
    return current_domain.repository_for(Notification)._dao.query.filter(user_id=user_id, is_read=False).all().items


# ---------------------------------------------------------------------------
# Then steps: inbox state
# ---------------------------------------------------------------------------
@then(parsers.re(r'user "(?P<user_id>[^"]+)" has (?P<count>\d+) unread notifications?'))
def unread_count_is(user_id, count):
    assert len(_unread(user_id)) == int(count)


@then(parsers.cfparse('the latest notification for "{user_id}" mentions "{text}"'))
def latest_mentions(user_id, text):
    items, _ = current_domain.repository_for(Notification).list_for_user(user_id, limit=1)
    assert text in items[0].message


@then(parsers.cfparse('the latest notification for "{user_id}" has type "{notification_type}"'))
def latest_has_type(user_id, notification_type):
    items, _ = current_domain.repository_for(Notification).list_for_user(user_id, limit=1)
    assert items[0].notification_type == notification_type


# ---------------------------------------------------------------------------
# Then steps: delivery outcomes
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the "{channel}" delivery succeeded'))
def delivery_succeeded(outcomes, channel):
    assert outcomes[channel].success is True


@then(parsers.cfparse('the "{channel}" delivery failed with an error'))
def delivery_failed(outcomes, channel):
    assert outcomes[channel].success is False
    assert outcomes[channel].error


@then(parsers.cfparse('the "{channel}" delivery failed with error "{error}"'))
def delivery_failed_with(outcomes, channel, error):
    assert outcomes[channel].success is False
    assert outcomes[channel].error == error
