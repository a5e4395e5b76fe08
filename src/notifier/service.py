"""NotificationService — the assembled notifier.

Built once per process from settings, and handed to whatever triggers
notifications (HTTP handlers, the ordering service, tests):

    service = NotificationService.from_settings(notifier, get_settings())
    await service.ordering.notify_order_placed(order)
    await service.drain()
"""

import structlog

from notifier.channel import Channels, build_channels
from notifier.directory.resolvers import DirectoryRecipientResolver, RecipientResolver
from notifier.notification.dispatch import NotificationDispatcher
from notifier.notification.fulfillment_events import FulfillmentNotifications
from notifier.notification.inbox import NotificationInbox
from notifier.notification.inventory_events import InventoryNotifications
from notifier.notification.notification_type import seed_notification_types
from notifier.notification.ordering_events import OrderingNotifications
from notifier.notification.store import NotificationStore
from notifier.notification.support_events import SupportNotifications
from notifier.preference.preference import PreferenceBook
from notifier.templates import DEFAULT_NOTIFICATION_TYPES, TemplateRenderer

logger = structlog.get_logger(__name__)


class NotificationService:
    def __init__(self, domain, settings, channels: Channels, resolver: RecipientResolver):
        self.domain = domain
        self.settings = settings
        self.channels = channels
        self.resolver = resolver

        store = NotificationStore()
        preferences = PreferenceBook()

        self.dispatcher = NotificationDispatcher(
            domain,
            channels,
            settings,
            renderer=TemplateRenderer(),
            preferences=preferences,
            store=store,
        )
        self.inbox = NotificationInbox(store=store, preferences=preferences)

        self.ordering = OrderingNotifications(self.dispatcher, resolver)
        self.fulfillment = FulfillmentNotifications(self.dispatcher, resolver)
        self.inventory = InventoryNotifications(self.dispatcher, resolver)
        self.support = SupportNotifications(self.dispatcher, resolver)

    @classmethod
    def from_settings(cls, domain, settings, channels=None, resolver=None) -> "NotificationService":
        return cls(
            domain,
            settings,
            channels=channels or build_channels(settings),
            resolver=resolver or DirectoryRecipientResolver(),
        )

    def seed_types(self, definitions=None, overwrite: bool = False):
        """Add missing notification types from the catalog to the current domain."""
        return seed_notification_types(definitions or DEFAULT_NOTIFICATION_TYPES, overwrite=overwrite)

    async def create_notification(self, type_name, template_data, source=None, recipient_ids=(), **options):
        return await self.dispatcher.create_notification(type_name, template_data, source, recipient_ids, **options)

    async def drain(self) -> None:
        """Wait for background email and SMS deliveries to finish."""
        pending = self.dispatcher.pending_deliveries
        await self.dispatcher.drain()
        if pending:
            logger.info("Notification deliveries drained", count=pending)
