"""Shared BDD fixtures and step definitions for the notifier."""

import pytest
from notifier.notification.events import NotificationCreated, NotificationRead, RecipientEmailed, RecipientEmailFailed
from notifier.notification.notification import EmailStatus, Notification
from notifier.preference.events import PreferenceChanged, PreferenceCreated
from notifier.preference.preference import UserNotificationPreference
from pytest_bdd import given, parsers, then

_EVENT_CLASSES = {
    "NotificationCreated": NotificationCreated,
    "NotificationRead": NotificationRead,
    "RecipientEmailed": RecipientEmailed,
    "RecipientEmailFailed": RecipientEmailFailed,
    "PreferenceCreated": PreferenceCreated,
    "PreferenceChanged": PreferenceChanged,
}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps — notifications
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a notification for "{first}" and "{second}"'),
    target_fixture="notification",
)
def notification_for_two(first, second):
    n = Notification.create(
        notification_type_id="type-bdd",
        notification_type="system_announcement",
        title="System Announcement",
        content="Maintenance tonight",
        recipients=[(first, EmailStatus.PENDING.value), (second, EmailStatus.PENDING.value)],
    )
    n._events.clear()
    return n


# ---------------------------------------------------------------------------
# Given steps — preferences
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a new user "{user_id}"'), target_fixture="user_id")
def new_user(user_id):
    return user_id


@given("a stored preference with default channels", target_fixture="preference")
def stored_default_preference():
    pref = UserNotificationPreference.create(user_id="cust-bdd-pref", notification_type_id="type-bdd")
    pref._events.clear()
    return pref


# ---------------------------------------------------------------------------
# Then steps — events
# ---------------------------------------------------------------------------
def _aggregate(request):
    for name in ("notification", "preference"):
        try:
            return request.getfixturevalue(name)
        except pytest.FixtureLookupError:
            continue
    raise AssertionError("No aggregate under test")


@then(parsers.cfparse("a {event_type} event is raised"))
def event_raised(request, event_type):
    aggregate = _aggregate(request)
    event_cls = _EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in aggregate._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in aggregate._events]}"


@then(parsers.cfparse("exactly one {event_type} event is raised"))
def exactly_one_event_raised(request, event_type):
    aggregate = _aggregate(request)
    event_cls = _EVENT_CLASSES[event_type]
    assert len([e for e in aggregate._events if isinstance(e, event_cls)]) == 1
