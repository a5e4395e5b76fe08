"""NotificationType aggregate — administrator-defined kinds of notification.

The ``name`` is the stable join key between business-event code, the title
rule, the typed payloads and user preferences. Types are seeded once and
only read while dispatching.
"""

from datetime import UTC, datetime
from enum import Enum

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, DateTime, String, Text
from protean.utils.globals import current_domain

from notifier.domain import notifier
from notifier.utils.db import fetch_all

logger = structlog.get_logger(__name__)


class NotificationCategory(Enum):
    ORDER = "order"
    PRODUCT = "product"
    ACCOUNT = "account"
    SYSTEM = "system"


@notifier.aggregate
class NotificationType:
    name: String(required=True, unique=True, max_length=100)
    description: String(required=True, max_length=500)

    # Templates
    template: Text(required=True)
    email_template: Text()
    sms_template: Text()

    # Presentation
    category: String(choices=NotificationCategory, default=NotificationCategory.SYSTEM.value)
    icon: String(max_length=50, default="bell")
    color: String(max_length=50, default="blue")

    is_user_configurable: Boolean(default=True)

    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def define(cls, name, description, template, **attributes):
        now = datetime.now(UTC)
        return cls(
            name=name,
            description=description,
            template=template,
            created_at=now,
            updated_at=now,
            **attributes,
        )

    def revise(self, **attributes):
        """Replace descriptive fields and templates."""
        for field_name, value in attributes.items():
            setattr(self, field_name, value)
        self.updated_at = datetime.now(UTC)

    @property
    def has_email_template(self) -> bool:
        return bool(self.email_template)


def find_type_by_name(name: str) -> NotificationType | None:
    repo = current_domain.repository_for(NotificationType)
    matches = repo._dao.query.filter(name=name).all().items
    return matches[0] if matches else None


def get_type_by_name(name: str) -> NotificationType:
    """Return the notification type called ``name``.

    Raises ObjectNotFoundError when it was never seeded.
    """
    notification_type = find_type_by_name(name)
    if notification_type is None:
        raise ObjectNotFoundError(f"Notification type '{name}' not found")
    return notification_type


def get_type(notification_type_id: str) -> NotificationType | None:
    repo = current_domain.repository_for(NotificationType)
    matches = repo._dao.query.filter(id=notification_type_id).all().items
    return matches[0] if matches else None


def list_types(configurable_only: bool = False) -> list[NotificationType]:
    query = current_domain.repository_for(NotificationType)._dao.query
    if configurable_only:
        query = query.filter(is_user_configurable=True)
    return sorted(fetch_all(query), key=lambda t: t.name)


def seed_notification_types(definitions: list[dict], overwrite: bool = False) -> list[NotificationType]:
    """Insert the notification types in ``definitions`` that do not exist yet.

    Types already stored are left as they are, so templates edited by an
    administrator survive a restart. ``overwrite=True`` revises them back to
    ``definitions``.
    """
    repo = current_domain.repository_for(NotificationType)
    seeded = []
    created = 0

    for definition in definitions:
        attributes = dict(definition)
        name = attributes.pop("name")
        notification_type = find_type_by_name(name)

        if notification_type is None:
            notification_type = NotificationType.define(name=name, **attributes)
            repo.add(notification_type)
            created += 1
        elif overwrite:
            notification_type.revise(**attributes)
            repo.add(notification_type)

        seeded.append(notification_type)

    logger.info("Notification types seeded", count=len(seeded), created=created, overwrite=overwrite)
    return seeded
