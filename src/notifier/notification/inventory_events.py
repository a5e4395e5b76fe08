"""Inventory threshold notifications for admins and the product's vendors."""

from notifier.notification.dispatch import NotificationSource
from notifier.notification.helpers import best_effort, unique_ids
from notifier.templates.payloads import LowInventoryData, OutOfStockData


class InventoryNotifications:
    def __init__(self, dispatcher, resolver):
        self.dispatcher = dispatcher
        self.resolver = resolver

    def _recipients(self, alert, vendor_ids) -> list[str]:
        if vendor_ids is None:
            vendor_ids = self.resolver.resolve_vendors_for_product(alert.product_id)
        return unique_ids(self.resolver.resolve_admins(), vendor_ids)

    @best_effort("low_inventory")
    async def notify_low_inventory(self, alert, vendor_ids=None):
        data = LowInventoryData(
            product_name=alert.product_name,
            material_name=alert.material_name or "N/A",
            color_name=alert.color_name or "N/A",
            current_level=alert.current_level,
            threshold=alert.threshold,
        )
        return await self.dispatcher.create_notification(
            "low_inventory",
            data,
            NotificationSource(type="inventory", id=str(alert.id)),
            self._recipients(alert, vendor_ids),
        )

    @best_effort("out_of_stock")
    async def notify_out_of_stock(self, alert, vendor_ids=None):
        data = OutOfStockData(
            product_name=alert.product_name,
            material_name=alert.material_name or "N/A",
            color_name=alert.color_name or "N/A",
        )
        return await self.dispatcher.create_notification(
            "out_of_stock",
            data,
            NotificationSource(type="inventory", id=str(alert.id)),
            self._recipients(alert, vendor_ids),
        )
