"""NotificationStore — persistence and per-recipient updates for notifications.

Updates load the aggregate, change exactly one recipient entry and save it
back, with no ``await`` in between. Running on a single event loop this makes
each update atomic with respect to every other update, so concurrent email
completions and read actions for different recipients of the same
notification never overwrite each other.
"""

from datetime import UTC, datetime

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.query import Q

from notifier.notification.notification import Notification
from notifier.projections.user_inbox import UserInbox
from notifier.utils.db import fetch_all

logger = structlog.get_logger(__name__)


class NotificationStore:
    # -------------------------------------------------------------------
    # Aggregate access
    # -------------------------------------------------------------------
    def add(self, notification: Notification) -> Notification:
        current_domain.repository_for(Notification).add(notification)
        return notification

    def get(self, notification_id) -> Notification:
        """Load a notification. Raises ObjectNotFoundError when missing."""
        return current_domain.repository_for(Notification).get(str(notification_id))

    # -------------------------------------------------------------------
    # Targeted recipient updates
    # -------------------------------------------------------------------
    def record_email_result(self, notification_id, user_id, sent: bool, error=None) -> bool:
        """Store the email outcome on the matching recipient only."""
        try:
            notification = self.get(notification_id)
        except ObjectNotFoundError:
            logger.warning(
                "Email result for unknown notification",
                notification_id=str(notification_id),
                user_id=str(user_id),
            )
            return False

        if not notification.record_email_result(user_id, sent=sent, error=error):
            return False

        self.add(notification)
        return True

    def mark_read(self, notification_id, user_id) -> bool:
        """Mark one recipient's entry read.

        Returns False when the notification does not exist, ``user_id`` is not
        one of its recipients, or the entry was already read.
        """
        try:
            notification = self.get(notification_id)
        except ObjectNotFoundError:
            return False

        if not notification.mark_read(user_id):
            return False

        self.add(notification)
        return True

    def mark_all_read(self, user_id) -> int:
        """Mark every unread notification of ``user_id`` read. Returns the count."""
        count = 0
        for entry in self.inbox_entries(user_id, read=False):
            if self.mark_read(entry.notification_id, user_id):
                count += 1

        logger.info("Marked all notifications read", user_id=str(user_id), count=count)
        return count

    # -------------------------------------------------------------------
    # Inbox queries
    # -------------------------------------------------------------------
    def _inbox_query(self, user_id, read=None, include_expired=False, as_of=None):
        query = current_domain.repository_for(UserInbox)._dao.query.filter(user_id=str(user_id))
        if read is not None:
            query = query.filter(is_read=read)
        if not include_expired:
            as_of = as_of or datetime.now(UTC)
            query = query.filter(Q(expires_at__isnull=True) | Q(expires_at__gt=as_of))
        return query.order_by("-created_at")

    def inbox_entries(self, user_id, read=None, include_expired=False, as_of=None) -> list[UserInbox]:
        """Inbox rows of ``user_id``, newest first.

        ``read`` filters on read state when not None. Expired notifications are
        left out unless ``include_expired`` is set.
        """
        return fetch_all(self._inbox_query(user_id, read=read, include_expired=include_expired, as_of=as_of))

    def inbox_page(self, user_id, offset: int, limit: int, read=None) -> tuple[list[UserInbox], int]:
        """One page of unexpired inbox rows and the total number of matching rows."""
        result = self._inbox_query(user_id, read=read).offset(offset).limit(limit).all()
        return result.items, result.total

    def inbox_entry(self, notification_id, user_id) -> UserInbox | None:
        repo = current_domain.repository_for(UserInbox)
        matches = (
            repo._dao.query.filter(
                notification_id=str(notification_id),
                user_id=str(user_id),
            )
            .all()
            .items
        )
        return matches[0] if matches else None

    def unread_count(self, user_id) -> int:
        return self._inbox_query(user_id, read=False).count()
