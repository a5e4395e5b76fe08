"""NotificationDispatcher — turns one business event into a fanned-out notification.

    type name + template data + user ids
        → render content and title from the NotificationType
        → look up users and their channel preferences (one query each)
        → persist one Notification with a recipient entry per in-app user
        → start email / SMS deliveries in the background

The caller waits for persistence only. Deliveries run as tracked asyncio
tasks, each send bounded by ``CHANNEL_SEND_TIMEOUT``; an email outcome is
written back to exactly its own recipient entry. Channel failures are logged
and recorded, never raised. Persistence failures propagate.
"""

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass

import structlog
from protean.exceptions import ObjectNotFoundError

from notifier.channel.delivery import guarded_send
from notifier.directory.user import find_users
from notifier.notification.notification import EmailStatus, Notification, NotificationPriority
from notifier.notification.notification_type import find_type_by_name
from notifier.notification.store import NotificationStore
from notifier.preference.preference import PreferenceBook
from notifier.templates import TemplateData, TemplateRenderer, generate_title

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class NotificationSource:
    """The business object a notification is about, e.g. ``("order", "<id>")``."""

    type: str
    id: str


@dataclass
class _EmailJob:
    user_id: str
    to: str
    subject: str
    body: str
    html_body: str


@dataclass
class _SMSJob:
    user_id: str
    to: str | None
    title: str
    body: str


class NotificationDispatcher:
    def __init__(
        self,
        domain,
        channels,
        settings,
        renderer: TemplateRenderer | None = None,
        preferences: PreferenceBook | None = None,
        store: NotificationStore | None = None,
    ):
        self.domain = domain
        self.channels = channels
        self.settings = settings
        self.renderer = renderer or TemplateRenderer()
        self.preferences = preferences or PreferenceBook()
        self.store = store or NotificationStore()
        self._tasks: set[asyncio.Task] = set()

    # -------------------------------------------------------------------
    # Fan-out
    # -------------------------------------------------------------------
    async def create_notification(
        self,
        type_name: str,
        template_data,
        source: NotificationSource | None = None,
        recipient_ids=(),
        *,
        priority: str = NotificationPriority.NORMAL.value,
        expires_at=None,
        allow_email: bool = True,
        allow_sms: bool = True,
    ) -> Notification | None:
        """Create and deliver a notification of type ``type_name``.

        Returns the persisted Notification, or None when no user ends up with
        in-app delivery enabled. Raises ObjectNotFoundError for an unknown
        type name.
        """
        notification_type = find_type_by_name(type_name)
        if notification_type is None:
            logger.error("Notification type not found", notification_type=type_name)
            raise ObjectNotFoundError(f"Notification type '{type_name}' not found")

        context = self._context_for(template_data)
        content = self.renderer.render(notification_type.template, context)
        title = generate_title(type_name, context, site_name=self.settings.SITE_NAME)

        recipient_ids = list(recipient_ids)
        users = find_users(recipient_ids)
        channel_prefs = self.preferences.for_users([u.id for u in users], notification_type.id)

        recipients = []
        email_jobs: list[_EmailJob] = []
        sms_jobs: list[_SMSJob] = []

        for user in users:
            user_id = str(user.id)
            pref = channel_prefs[user_id]
            if not pref.in_app:
                continue

            recipients.append((user_id, EmailStatus.PENDING.value if pref.email else None))

            if pref.email and allow_email and notification_type.has_email_template:
                email_context = {
                    **context,
                    "name": user.display_name,
                    "frontendUrl": self.settings.FRONTEND_URL,
                }
                email_jobs.append(
                    _EmailJob(
                        user_id=user_id,
                        to=user.email,
                        subject=title,
                        body=content,
                        html_body=self.renderer.render(notification_type.email_template, email_context, escape=True),
                    )
                )

            if pref.sms and allow_sms:
                sms_body = (
                    self.renderer.render(notification_type.sms_template, context)
                    if notification_type.sms_template
                    else content
                )
                sms_jobs.append(_SMSJob(user_id=user_id, to=user.phone, title=title, body=sms_body))

        if not recipients:
            logger.info(
                "No recipients with in-app delivery enabled, notification skipped",
                notification_type=type_name,
                requested=len(recipient_ids),
            )
            return None

        notification = Notification.create(
            notification_type_id=str(notification_type.id),
            notification_type=type_name,
            title=title,
            content=content,
            recipients=recipients,
            source_type=source.type if source else None,
            source_id=str(source.id) if source else None,
            priority=priority,
            expires_at=expires_at,
        )
        self.store.add(notification)

        logger.info(
            "Notification created",
            notification_id=str(notification.id),
            notification_type=type_name,
            recipients=len(recipients),
            emails=len(email_jobs),
            sms=len(sms_jobs),
        )

        for job in email_jobs:
            self._track(self._deliver_email(str(notification.id), job))
        for job in sms_jobs:
            self._track(self._deliver_sms(str(notification.id), job))

        return notification

    # -------------------------------------------------------------------
    # Background deliveries
    # -------------------------------------------------------------------
    def _track(self, coro) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    @property
    def pending_deliveries(self) -> int:
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait until every in-flight delivery has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _deliver_email(self, notification_id: str, job: _EmailJob) -> None:
        result = await guarded_send(
            self.channels.email.send(
                to=job.to,
                subject=job.subject,
                body=job.body,
                html_body=job.html_body,
            ),
            timeout=self.settings.CHANNEL_SEND_TIMEOUT,
            channel="email",
            to=job.to,
        )
        sent = result.get("status") == "sent"

        try:
            with self.domain.domain_context():
                self.store.record_email_result(notification_id, job.user_id, sent=sent, error=result.get("error"))
        except Exception:
            logger.exception(
                "Failed to record email result",
                notification_id=notification_id,
                user_id=job.user_id,
            )
            return

        logger.debug(
            "Email delivery finished",
            notification_id=notification_id,
            user_id=job.user_id,
            status="sent" if sent else "failed",
        )

    async def _deliver_sms(self, notification_id: str, job: _SMSJob) -> None:
        result = await guarded_send(
            self.channels.sms.send(to=job.to, title=job.title, body=job.body),
            timeout=self.settings.CHANNEL_SEND_TIMEOUT,
            channel="sms",
            to=job.to,
        )
        logger.debug(
            "SMS delivery finished",
            notification_id=notification_id,
            user_id=job.user_id,
            status=result.get("status"),
        )

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    @staticmethod
    def _context_for(template_data) -> dict:
        if template_data is None:
            return {}
        if isinstance(template_data, TemplateData):
            return template_data.as_context()
        if isinstance(template_data, Mapping):
            return dict(template_data)
        raise TypeError(f"Unsupported template data: {type(template_data).__name__}")
