"""Domain events for the Notification aggregate."""

from protean.fields import DateTime, Identifier, Integer, String, Text

from notifier.domain import notifier


@notifier.event(part_of="Notification")
class NotificationCreated:
    """A notification was persisted for one or more recipients."""

    __version__ = 1

    notification_id: Identifier(required=True)
    notification_type: String(required=True)
    title: String(required=True)
    content: Text(required=True)
    source_type: String()
    source_id: String()
    priority: String(required=True)
    recipient_ids: Text(required=True)  # JSON list of user ids
    recipient_count: Integer(required=True)
    expires_at: DateTime()
    created_at: DateTime(required=True)


@notifier.event(part_of="Notification")
class NotificationRead:
    """A recipient read the notification."""

    __version__ = 1

    notification_id: Identifier(required=True)
    user_id: Identifier(required=True)
    read_at: DateTime(required=True)


@notifier.event(part_of="Notification")
class RecipientEmailed:
    """The email copy reached the mail server for one recipient."""

    __version__ = 1

    notification_id: Identifier(required=True)
    user_id: Identifier(required=True)
    emailed_at: DateTime(required=True)


@notifier.event(part_of="Notification")
class RecipientEmailFailed:
    """The email copy could not be delivered to one recipient."""

    __version__ = 1

    notification_id: Identifier(required=True)
    user_id: Identifier(required=True)
    reason: String(required=True)
    failed_at: DateTime(required=True)
