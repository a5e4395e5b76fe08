"""NotificationInbox — what a signed-in user sees of their notifications.

Every result is scoped to the calling user: read state comes from that
user's own recipient entry, and other recipients are never exposed.
"""

import math

import structlog
from protean.exceptions import ObjectNotFoundError

from notifier.notification.notification_type import get_type, list_types
from notifier.notification.store import NotificationStore
from notifier.preference.preference import ChannelPreference, PreferenceBook

logger = structlog.get_logger(__name__)

MAX_PAGE_SIZE = 100


def _flatten(entry) -> dict:
    return {
        "id": str(entry.notification_id),
        "title": entry.title,
        "content": entry.content,
        "type": entry.notification_type,
        "priority": entry.priority,
        "source_type": entry.source_type,
        "source_id": entry.source_id,
        "created_at": entry.created_at,
        "is_read": bool(entry.is_read),
        "read_at": entry.read_at,
    }


class NotificationInbox:
    def __init__(self, store: NotificationStore | None = None, preferences: PreferenceBook | None = None):
        self.store = store or NotificationStore()
        self.preferences = preferences or PreferenceBook()

    # -------------------------------------------------------------------
    # Notifications
    # -------------------------------------------------------------------
    def get_user_notifications(self, user_id, page: int = 1, limit: int = 10, read: bool | None = None) -> dict:
        """One page of the user's notifications, newest first."""
        page = max(int(page), 1)
        limit = min(max(int(limit), 1), MAX_PAGE_SIZE)

        entries, total = self.store.inbox_page(user_id, offset=(page - 1) * limit, limit=limit, read=read)
        data = [_flatten(entry) for entry in entries]

        return {
            "count": len(data),
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "pages": math.ceil(total / limit),
            },
            "data": data,
        }

    def get_notification(self, user_id, notification_id) -> dict:
        """Return one notification and mark it read for ``user_id``.

        Raises ObjectNotFoundError when the notification does not exist or
        the user is not one of its recipients.
        """
        entry = self.store.inbox_entry(notification_id, user_id)
        if entry is None:
            raise ObjectNotFoundError(f"Notification {notification_id} not found")

        if not entry.is_read:
            self.store.mark_read(notification_id, user_id)
            entry = self.store.inbox_entry(notification_id, user_id)

        return _flatten(entry)

    def mark_as_read(self, notification_id, user_id) -> bool:
        return self.store.mark_read(notification_id, user_id)

    def mark_all_as_read(self, user_id) -> int:
        return self.store.mark_all_read(user_id)

    def get_unread_count(self, user_id) -> int:
        return self.store.unread_count(user_id)

    # -------------------------------------------------------------------
    # Preferences
    # -------------------------------------------------------------------
    def get_notification_preferences(self, user_id) -> list[dict]:
        """Every configurable type with the user's channel switches applied."""
        stored = self.preferences.for_user(user_id)
        result = []

        for notification_type in list_types(configurable_only=True):
            record = stored.get(str(notification_type.id))
            pref = record.as_channel_preference() if record else ChannelPreference.default()
            result.append(
                {
                    "id": str(notification_type.id),
                    "name": notification_type.name,
                    "description": notification_type.description,
                    "category": notification_type.category,
                    "icon": notification_type.icon,
                    "color": notification_type.color,
                    "in_app_enabled": pref.in_app,
                    "email_enabled": pref.email,
                    "sms_enabled": pref.sms,
                }
            )

        return result

    def update_notification_preferences(self, user_id, updates) -> list[dict]:
        """Apply ``[{id, in_app_enabled?, email_enabled?, sms_enabled?}, ...]``.

        Items without an id or without any flag are skipped. Returns one
        result per applied item.
        """
        results = []

        for item in updates:
            type_id = item.get("id")
            flags = {
                "in_app": item.get("in_app_enabled"),
                "email": item.get("email_enabled"),
                "sms": item.get("sms_enabled"),
            }
            if not type_id or all(value is None for value in flags.values()):
                continue

            if get_type(type_id) is None:
                results.append({"id": type_id, "success": False, "message": "Notification type not found"})
                continue

            preference = self.preferences.upsert(user_id, type_id, **flags)
            results.append(
                {
                    "id": type_id,
                    "success": True,
                    "in_app_enabled": preference.in_app_enabled,
                    "email_enabled": preference.email_enabled,
                    "sms_enabled": preference.sms_enabled,
                }
            )

        logger.info("Notification preferences updated", user_id=str(user_id), items=len(results))
        return results
