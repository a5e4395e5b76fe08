"""Notification aggregate (CQRS) — one rendered message fanned out to many users.

Title and content are captured when the notification is created; later edits
to the NotificationType templates never alter historical notifications.

Each Recipient entry carries that user's own state:

    is_read / read_at              flipped by explicit read actions
    email_status / is_emailed /    flipped once the asynchronous email send
    emailed_at                     for that user resolves

    email_status: PENDING → SENT
                  PENDING → FAILED
                  None      (email not enabled for this user)

Mutations always address a single recipient by user id and leave the other
entries untouched.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, Identifier, String, Text

from notifier.domain import notifier
from notifier.notification.events import (
    NotificationCreated,
    NotificationRead,
    RecipientEmailed,
    RecipientEmailFailed,
)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class NotificationPriority(Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class EmailStatus(Enum):
    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@notifier.entity(part_of="Notification")
class Recipient:
    user_id: Identifier(required=True)

    # In-app read state
    is_read: Boolean(default=False)
    read_at: DateTime()

    # Email delivery state
    is_emailed: Boolean(default=False)
    emailed_at: DateTime()
    email_status: String(choices=EmailStatus)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@notifier.aggregate
class Notification:
    """A notification delivered in-app to one or more users."""

    notification_type_id: Identifier(required=True)
    notification_type: String(required=True, max_length=100)

    # Content, denormalized at creation
    title: String(required=True, max_length=500)
    content: Text(required=True)

    # Polymorphic back-reference to the triggering object ("order", "inventory", ...)
    source_type: String(max_length=50)
    source_id: String(max_length=255)

    recipients = HasMany(Recipient)

    priority: String(choices=NotificationPriority, default=NotificationPriority.NORMAL.value)
    expires_at: DateTime()

    created_at: DateTime()
    updated_at: DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        notification_type_id,
        notification_type,
        title,
        content,
        recipients,
        source_type=None,
        source_id=None,
        priority=NotificationPriority.NORMAL.value,
        expires_at=None,
    ):
        """Create a notification for ``recipients``.

        ``recipients`` is a sequence of ``(user_id, email_status)`` pairs where
        ``email_status`` is ``EmailStatus.PENDING.value`` or None.
        """
        if not recipients:
            raise ValidationError({"recipients": ["Notification must have at least one recipient"]})

        now = datetime.now(UTC)

        notification = cls(
            notification_type_id=notification_type_id,
            notification_type=notification_type,
            title=title,
            content=content,
            source_type=source_type,
            source_id=source_id,
            priority=priority,
            expires_at=expires_at,
            recipients=[
                Recipient(
                    user_id=user_id,
                    is_read=False,
                    is_emailed=False,
                    email_status=email_status,
                )
                for user_id, email_status in recipients
            ],
            created_at=now,
            updated_at=now,
        )

        recipient_ids = [str(user_id) for user_id, _ in recipients]
        notification.raise_(
            NotificationCreated(
                notification_id=str(notification.id),
                notification_type=notification_type,
                title=title,
                content=content,
                source_type=source_type,
                source_id=source_id,
                priority=priority,
                recipient_ids=json.dumps(recipient_ids),
                recipient_count=len(recipient_ids),
                expires_at=expires_at,
                created_at=now,
            )
        )

        return notification

    # -------------------------------------------------------------------
    # Recipient lookup
    # -------------------------------------------------------------------
    def recipient_for(self, user_id):
        """Return the recipient entry for ``user_id``, or None."""
        return next((r for r in self.recipients if str(r.user_id) == str(user_id)), None)

    # -------------------------------------------------------------------
    # Read state
    # -------------------------------------------------------------------
    def mark_read(self, user_id, read_at=None) -> bool:
        """Mark the notification as read for one recipient.

        Returns False when ``user_id`` is not a recipient or has already read it.
        """
        recipient = self.recipient_for(user_id)
        if recipient is None or recipient.is_read:
            return False

        now = read_at or datetime.now(UTC)
        recipient.is_read = True
        recipient.read_at = now
        self.add_recipients(recipient)

        self.raise_(
            NotificationRead(
                notification_id=str(self.id),
                user_id=str(user_id),
                read_at=now,
            )
        )
        return True

    # -------------------------------------------------------------------
    # Email delivery state
    # -------------------------------------------------------------------
    def record_email_result(self, user_id, sent: bool, error=None, at=None) -> bool:
        """Apply the outcome of the email send for one recipient.

        ``emailed_at`` is only set on success. Returns False when ``user_id``
        is not a recipient.
        """
        recipient = self.recipient_for(user_id)
        if recipient is None:
            return False

        now = at or datetime.now(UTC)
        if sent:
            recipient.email_status = EmailStatus.SENT.value
            recipient.is_emailed = True
            recipient.emailed_at = now
        else:
            recipient.email_status = EmailStatus.FAILED.value
            recipient.is_emailed = False
        self.add_recipients(recipient)

        if sent:
            self.raise_(
                RecipientEmailed(
                    notification_id=str(self.id),
                    user_id=str(user_id),
                    emailed_at=now,
                )
            )
        else:
            self.raise_(
                RecipientEmailFailed(
                    notification_id=str(self.id),
                    user_id=str(user_id),
                    reason=str(error or "Email delivery failed")[:500],
                    failed_at=now,
                )
            )
        return True
