"""UserNotificationPreference aggregate (CQRS) — per-user, per-type channel choices.

A record exists only once the user has explicitly edited their choices for a
notification type. Absence means the defaults apply:

    in_app  on
    email   on
    sms     off

``key`` is ``"<user_id>:<notification_type_id>"`` and is unique, so the store
itself refuses a second record for the same pair.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

import structlog
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String
from protean.utils.globals import current_domain

from notifier.domain import notifier
from notifier.preference.events import PreferenceChanged, PreferenceCreated
from notifier.utils.db import fetch_all

logger = structlog.get_logger(__name__)


def preference_key(user_id, notification_type_id) -> str:
    return f"{user_id}:{notification_type_id}"


@dataclass(frozen=True)
class ChannelPreference:
    """Resolved channel switches for one user and one notification type."""

    in_app: bool = True
    email: bool = True
    sms: bool = False

    @classmethod
    def default(cls) -> "ChannelPreference":
        return cls()


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@notifier.aggregate
class UserNotificationPreference:
    user_id: Identifier(required=True)
    notification_type_id: Identifier(required=True)
    key: String(required=True, unique=True, max_length=255)

    in_app_enabled: Boolean(default=True)
    email_enabled: Boolean(default=True)
    sms_enabled: Boolean(default=False)

    created_at: DateTime()
    updated_at: DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id, notification_type_id, in_app=None, email=None, sms=None):
        """Create a preference record, starting from the defaults."""
        defaults = ChannelPreference.default()
        now = datetime.now(UTC)

        preference = cls(
            user_id=user_id,
            notification_type_id=notification_type_id,
            key=preference_key(user_id, notification_type_id),
            in_app_enabled=defaults.in_app if in_app is None else in_app,
            email_enabled=defaults.email if email is None else email,
            sms_enabled=defaults.sms if sms is None else sms,
            created_at=now,
            updated_at=now,
        )

        preference.raise_(
            PreferenceCreated(
                preference_id=str(preference.id),
                user_id=str(user_id),
                notification_type_id=str(notification_type_id),
                in_app_enabled=preference.in_app_enabled,
                email_enabled=preference.email_enabled,
                sms_enabled=preference.sms_enabled,
                created_at=now,
            )
        )

        return preference

    # -------------------------------------------------------------------
    # Channel management
    # -------------------------------------------------------------------
    def update_channels(self, in_app=None, email=None, sms=None):
        """Update channel switches. Pass None to keep unchanged."""
        if in_app is None and email is None and sms is None:
            raise ValidationError({"channels": ["At least one channel preference must be provided"]})

        now = datetime.now(UTC)

        if in_app is not None:
            self.in_app_enabled = in_app
        if email is not None:
            self.email_enabled = email
        if sms is not None:
            self.sms_enabled = sms
        self.updated_at = now

        self.raise_(
            PreferenceChanged(
                preference_id=str(self.id),
                user_id=str(self.user_id),
                notification_type_id=str(self.notification_type_id),
                in_app_enabled=self.in_app_enabled,
                email_enabled=self.email_enabled,
                sms_enabled=self.sms_enabled,
                updated_at=now,
            )
        )

    def as_channel_preference(self) -> ChannelPreference:
        return ChannelPreference(
            in_app=bool(self.in_app_enabled),
            email=bool(self.email_enabled),
            sms=bool(self.sms_enabled),
        )


# ---------------------------------------------------------------------------
# Preference lookup
# ---------------------------------------------------------------------------
class PreferenceBook:
    """Reads and writes preferences through the current domain's repository."""

    def for_users(self, user_ids, notification_type_id) -> dict[str, ChannelPreference]:
        """Resolve preferences for many users with a single query.

        Users without a stored record get ``ChannelPreference.default()``.
        """
        user_ids = [str(user_id) for user_id in user_ids]
        if not user_ids:
            return {}

        repo = current_domain.repository_for(UserNotificationPreference)
        stored = (
            repo._dao.query.filter(
                user_id__in=user_ids,
                notification_type_id=str(notification_type_id),
            )
            .limit(len(user_ids))
            .all()
            .items
        )
        by_user = {str(p.user_id): p.as_channel_preference() for p in stored}

        return {user_id: by_user.get(user_id, ChannelPreference.default()) for user_id in user_ids}

    def for_user(self, user_id) -> dict[str, UserNotificationPreference]:
        """Return the user's stored records keyed by notification type id."""
        repo = current_domain.repository_for(UserNotificationPreference)
        stored = fetch_all(repo._dao.query.filter(user_id=str(user_id)))
        return {str(p.notification_type_id): p for p in stored}

    def find(self, user_id, notification_type_id) -> UserNotificationPreference | None:
        repo = current_domain.repository_for(UserNotificationPreference)
        matches = repo._dao.query.filter(key=preference_key(user_id, notification_type_id)).all().items
        return matches[0] if matches else None

    def upsert(self, user_id, notification_type_id, in_app=None, email=None, sms=None) -> UserNotificationPreference:
        """Create the record on first edit, otherwise update it in place."""
        repo = current_domain.repository_for(UserNotificationPreference)
        preference = self.find(user_id, notification_type_id)

        if preference is None:
            preference = UserNotificationPreference.create(
                user_id=str(user_id),
                notification_type_id=str(notification_type_id),
                in_app=in_app,
                email=email,
                sms=sms,
            )
        else:
            preference.update_channels(in_app=in_app, email=email, sms=sms)

        repo.add(preference)

        logger.info(
            "Notification preference saved",
            user_id=str(user_id),
            notification_type_id=str(notification_type_id),
            in_app=preference.in_app_enabled,
            email=preference.email_enabled,
            sms=preference.sms_enabled,
        )
        return preference
