"""UserInbox — one row per (notification, recipient) for inbox queries.

Read state is copied from the Notification aggregate's events, so a row only
ever reflects its own recipient's state.
"""

import json

from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, DateTime, Identifier, String, Text
from protean.utils.globals import current_domain

from notifier.domain import notifier
from notifier.notification.events import NotificationCreated, NotificationRead
from notifier.notification.notification import Notification


def inbox_entry_id(notification_id, user_id) -> str:
    return f"{notification_id}:{user_id}"


@notifier.projection
class UserInbox:
    entry_id: Identifier(identifier=True, required=True)
    notification_id: Identifier(required=True)
    user_id: Identifier(required=True)
    notification_type: String(required=True, max_length=100)
    title: String(required=True, max_length=500)
    content: Text(required=True)
    priority: String(max_length=20)
    source_type: String(max_length=50)
    source_id: String(max_length=255)
    is_read: Boolean(default=False)
    read_at: DateTime()
    expires_at: DateTime()
    created_at: DateTime()


@notifier.projector(projector_for=UserInbox, aggregates=[Notification])
class UserInboxProjector:
    @on(NotificationCreated)
    def on_notification_created(self, event):
        repo = current_domain.repository_for(UserInbox)
        for user_id in json.loads(event.recipient_ids):
            repo.add(
                UserInbox(
                    entry_id=inbox_entry_id(event.notification_id, user_id),
                    notification_id=event.notification_id,
                    user_id=user_id,
                    notification_type=event.notification_type,
                    title=event.title,
                    content=event.content,
                    priority=event.priority,
                    source_type=event.source_type,
                    source_id=event.source_id,
                    is_read=False,
                    expires_at=event.expires_at,
                    created_at=event.created_at,
                )
            )

    @on(NotificationRead)
    def on_notification_read(self, event):
        repo = current_domain.repository_for(UserInbox)
        try:
            entry = repo.get(inbox_entry_id(event.notification_id, event.user_id))
        except ObjectNotFoundError:
            return
        entry.is_read = True
        entry.read_at = event.read_at
        repo.add(entry)
