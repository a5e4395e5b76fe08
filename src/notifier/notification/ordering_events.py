"""Order lifecycle notifications.

Called by the ordering service after an order was placed or its status
changed. Every builder resolves its own recipients and fails on its own.
"""

import structlog

from notifier.notification.dispatch import NotificationSource
from notifier.notification.helpers import best_effort, format_date, format_datetime
from notifier.templates.payloads import (
    NewOrderData,
    OrderConfirmationData,
    OrderDeliveredData,
    OrderShippedData,
    OrderStatusUpdateData,
)

logger = structlog.get_logger(__name__)

SHIPPED = "shipped"
DELIVERED = "delivered"


def _source(order) -> NotificationSource:
    return NotificationSource(type="order", id=str(order.id))


def _unchanged(order, previous_status) -> bool:
    return previous_status is not None and previous_status == order.status


class OrderingNotifications:
    def __init__(self, dispatcher, resolver):
        self.dispatcher = dispatcher
        self.resolver = resolver

    # -------------------------------------------------------------------
    # Order placed
    # -------------------------------------------------------------------
    @best_effort("new_order")
    async def notify_new_order(self, order):
        """Tell the vendors whose products are in the order."""
        vendor_ids = self.resolver.resolve_vendors_for_order(order)
        if not vendor_ids:
            logger.info("No vendors for order, new order notification skipped", order_id=str(order.id))
            return None

        data = NewOrderData(
            order_number=order.order_number,
            total=order.total_price,
            item_count=len(order.items),
            order_date=format_datetime(order.created_at),
        )
        return await self.dispatcher.create_notification("new_order", data, _source(order), vendor_ids)

    @best_effort("order_confirmation")
    async def notify_order_confirmation(self, order):
        data = OrderConfirmationData(
            order_number=order.order_number,
            total=order.total_price,
            estimated_delivery=format_date(order.estimated_delivery_date, days_from_now=7),
        )
        return await self.dispatcher.create_notification(
            "order_confirmation", data, _source(order), [order.customer_id]
        )

    async def notify_order_placed(self, order) -> list:
        """Vendor alert, then customer acknowledgement. Returns both results."""
        return [
            await self.notify_new_order(order),
            await self.notify_order_confirmation(order),
        ]

    # -------------------------------------------------------------------
    # Status changes
    # -------------------------------------------------------------------
    @best_effort("order_status_update")
    async def notify_order_status_update(self, order, previous_status, additional_info=""):
        if _unchanged(order, previous_status):
            return None

        data = OrderStatusUpdateData(
            order_number=order.order_number,
            status=order.status,
            previous_status=previous_status,
            additional_info=additional_info or "",
        )
        return await self.dispatcher.create_notification(
            "order_status_update", data, _source(order), [order.customer_id]
        )

    @best_effort("order_shipped")
    async def notify_order_shipped(self, order, previous_status=None):
        if _unchanged(order, previous_status):
            return None

        data = OrderShippedData(
            order_number=order.order_number,
            tracking_number=order.tracking_number or "Not available",
            tracking_url=order.tracking_url or "#",
            carrier="Shipping Provider",
            estimated_delivery=format_date(order.estimated_delivery_date, days_from_now=3),
        )
        return await self.dispatcher.create_notification("order_shipped", data, _source(order), [order.customer_id])

    @best_effort("order_delivered")
    async def notify_order_delivered(self, order, previous_status=None):
        if _unchanged(order, previous_status):
            return None

        data = OrderDeliveredData(
            order_number=order.order_number,
            delivery_date=format_date(order.delivered_at),
        )
        return await self.dispatcher.create_notification(
            "order_delivered", data, _source(order), [order.customer_id]
        )

    async def notify_order_status_change(self, order, previous_status, additional_info="") -> list:
        """Status update, followed by the shipped or delivered notice when it applies."""
        if _unchanged(order, previous_status):
            return []

        results = [await self.notify_order_status_update(order, previous_status, additional_info)]

        status = (order.status or "").lower()
        if status == SHIPPED:
            results.append(await self.notify_order_shipped(order, previous_status))
        elif status == DELIVERED:
            results.append(await self.notify_order_delivered(order, previous_status))

        return results
