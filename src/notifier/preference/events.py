"""Domain events for the UserNotificationPreference aggregate."""

from protean.fields import Boolean, DateTime, Identifier

from notifier.domain import notifier


@notifier.event(part_of="UserNotificationPreference")
class PreferenceCreated:
    """A user saved channel choices for a notification type for the first time."""

    __version__ = 1

    preference_id: Identifier(required=True)
    user_id: Identifier(required=True)
    notification_type_id: Identifier(required=True)
    in_app_enabled: Boolean(required=True)
    email_enabled: Boolean(required=True)
    sms_enabled: Boolean(required=True)
    created_at: DateTime(required=True)


@notifier.event(part_of="UserNotificationPreference")
class PreferenceChanged:
    """A user changed channel choices for a notification type."""

    __version__ = 1

    preference_id: Identifier(required=True)
    user_id: Identifier(required=True)
    notification_type_id: Identifier(required=True)
    in_app_enabled: Boolean(required=True)
    email_enabled: Boolean(required=True)
    sms_enabled: Boolean(required=True)
    updated_at: DateTime(required=True)
