"""Shipment lifecycle notifications: shipped, tracking updates, damage, returns."""

import structlog

from notifier.notification.dispatch import NotificationSource
from notifier.notification.helpers import best_effort, format_date, format_datetime, humanize_status
from notifier.notification.notification import NotificationPriority
from notifier.templates.payloads import (
    DamageReportConfirmationData,
    DamageReportData,
    ReturnCreatedData,
    ShipmentCreatedData,
    ShippingUpdateData,
)

logger = structlog.get_logger(__name__)

# Tracking statuses worth an email and a text message; the rest are in-app only.
OUT_OF_BAND_STATUSES = frozenset({"out_for_delivery", "delivered", "exception"})


class FulfillmentNotifications:
    def __init__(self, dispatcher, resolver):
        self.dispatcher = dispatcher
        self.resolver = resolver

    @best_effort("shipment_created")
    async def notify_shipment_created(self, order, shipment):
        data = ShipmentCreatedData(
            order_number=order.order_number,
            carrier=shipment.carrier or "Shipping Provider",
            tracking_number=shipment.tracking_number or "Not available",
            tracking_url=shipment.tracking_url or "#",
            estimated_delivery=(
                format_date(shipment.estimated_delivery_date)
                if shipment.estimated_delivery_date
                else "To be determined"
            ),
            details_url=f"/account/orders/{order.id}",
        )
        return await self.dispatcher.create_notification(
            "shipment_created",
            data,
            NotificationSource(type="shipment", id=str(shipment.id)),
            [order.customer_id],
        )

    @best_effort("shipping_update")
    async def notify_shipping_update(self, order, shipment, event):
        out_of_band = event.status in OUT_OF_BAND_STATUSES

        data = ShippingUpdateData(
            order_number=order.order_number,
            description=event.description,
            status=humanize_status(event.status),
            event_date=format_datetime(event.event_date),
            location=event.location or "",
            details_url=f"/account/shipments/{shipment.id}",
        )
        return await self.dispatcher.create_notification(
            "shipping_update",
            data,
            NotificationSource(type="shipment", id=str(shipment.id)),
            [order.customer_id],
            allow_email=out_of_band,
            allow_sms=out_of_band,
        )

    async def notify_shipment_damage(self, order, shipment, description) -> list:
        """Alert the vendors (or admins), then acknowledge the customer.

        The two notifications are independent: one failing does not stop
        the other.
        """
        return [
            await self.notify_damage_report(order, shipment, description),
            await self.notify_damage_report_confirmation(order, shipment),
        ]

    @best_effort("damage_report")
    async def notify_damage_report(self, order, shipment, description):
        recipient_ids = self.resolver.resolve_vendors_for_order(order)
        if not recipient_ids:
            logger.info("No vendors for order, damage report sent to admins", order_id=str(order.id))
            recipient_ids = self.resolver.resolve_admins()

        data = DamageReportData(
            order_number=order.order_number,
            description=description,
            details_url=f"/vendor/orders/{order.id}",
        )
        return await self.dispatcher.create_notification(
            "damage_report",
            data,
            NotificationSource(type="order", id=str(order.id)),
            recipient_ids,
            priority=NotificationPriority.HIGH.value,
        )

    @best_effort("damage_report_confirmation")
    async def notify_damage_report_confirmation(self, order, shipment):
        data = DamageReportConfirmationData(
            order_number=order.order_number,
            details_url=f"/account/orders/{order.id}",
        )
        return await self.dispatcher.create_notification(
            "damage_report_confirmation",
            data,
            NotificationSource(type="order", id=str(order.id)),
            [order.customer_id],
        )

    @best_effort("return_created")
    async def notify_return_created(self, order, return_shipment):
        data = ReturnCreatedData(
            order_number=order.order_number,
            return_reason=return_shipment.return_reason or "Not specified",
            tracking_number=return_shipment.tracking_number or "Not available",
            tracking_url=return_shipment.tracking_url or "#",
            details_url=f"/account/shipments/{return_shipment.id}",
        )
        return await self.dispatcher.create_notification(
            "return_created",
            data,
            NotificationSource(type="shipment", id=str(return_shipment.id)),
            [order.customer_id],
        )
