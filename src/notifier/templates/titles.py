"""Notification titles.

Bodies are rendered from the NotificationType templates; titles are not. They
come from a fixed rule keyed by the type name so that every client shows the
same headline for the same event regardless of how an administrator words the
body template.
"""

from collections.abc import Mapping
from typing import Any


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def generate_title(type_name: str, data: Mapping[str, Any], site_name: str = "SmartBlinds") -> str:
    """Return the headline for a notification of ``type_name``."""
    order_number = _text(data, "orderNumber")

    match type_name:
        case "new_order":
            return f"New Order #{order_number}"
        case "order_confirmation":
            return f"Order Confirmation: #{order_number}"
        case "order_status_update":
            return f"Order Status Update: #{order_number}"
        case "order_shipped":
            return f"Order Shipped: #{order_number}"
        case "order_delivered":
            return f"Order Delivered: #{order_number}"
        case "low_inventory":
            return f"Low Inventory Alert: {_text(data, 'productName')}"
        case "out_of_stock":
            return f"Out of Stock: {_text(data, 'productName')}"
        case "new_question":
            return f"New Question: {_text(data, 'subject')}"
        case "question_reply":
            return f"New Reply: {_text(data, 'subject')}"
        case "system_announcement":
            return _text(data, "title") or "System Announcement"
        case "policy_update":
            return f"Policy Update: {_text(data, 'title')}"
        case "shipment_created":
            return f"Order Shipped: {order_number}"
        case "shipping_update":
            return f"Shipping Update for Order: {order_number}"
        case "damage_report":
            return f"Damage Reported for Order: {order_number}"
        case "damage_report_confirmation":
            return f"Damage Report Received: {order_number}"
        case "return_created":
            return f"Return Shipment Created: {order_number}"
        case _:
            return f"{site_name} Notification"
