"""Typed template data, one model per notification type.

Builders construct these instead of loose dicts so a missing field fails at
construction time rather than rendering an empty placeholder. Field names are
snake_case in Python and dumped camelCase, which is what the stored templates
reference (``{{orderNumber}}``).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TemplateData(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def as_context(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------
class NewOrderData(TemplateData):
    order_number: str
    total: float
    item_count: int
    order_date: str


class OrderConfirmationData(TemplateData):
    order_number: str
    total: float
    estimated_delivery: str


class OrderStatusUpdateData(TemplateData):
    order_number: str
    status: str
    previous_status: str | None = None
    additional_info: str = ""


class OrderShippedData(TemplateData):
    order_number: str
    tracking_number: str
    tracking_url: str
    carrier: str
    estimated_delivery: str


class OrderDeliveredData(TemplateData):
    order_number: str
    delivery_date: str


# ---------------------------------------------------------------------------
# Inventory
# ---------------------------------------------------------------------------
class LowInventoryData(TemplateData):
    product_name: str
    material_name: str
    color_name: str
    current_level: int
    threshold: int


class OutOfStockData(TemplateData):
    product_name: str
    material_name: str
    color_name: str


# ---------------------------------------------------------------------------
# Customer support
# ---------------------------------------------------------------------------
class NewQuestionData(TemplateData):
    topic: str
    subject: str
    message: str


class QuestionReplyData(TemplateData):
    topic: str
    subject: str
    reply_message: str


# ---------------------------------------------------------------------------
# Fulfillment
# ---------------------------------------------------------------------------
class ShipmentCreatedData(TemplateData):
    order_number: str
    carrier: str
    tracking_number: str
    tracking_url: str
    estimated_delivery: str
    details_url: str


class ShippingUpdateData(TemplateData):
    order_number: str
    description: str
    status: str
    event_date: str
    location: str = ""
    details_url: str


class DamageReportData(TemplateData):
    order_number: str
    description: str
    details_url: str


class DamageReportConfirmationData(TemplateData):
    order_number: str
    details_url: str


class ReturnCreatedData(TemplateData):
    order_number: str
    return_reason: str
    tracking_number: str
    tracking_url: str
    details_url: str
