"""Cross-domain contracts for shipments and their tracking events."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict


class Shipment(BaseModel):
    """An outbound or return shipment for an order."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    order_id: str
    carrier: str | None = None
    tracking_number: str | None = None
    tracking_url: str | None = None
    estimated_delivery_date: date | None = None
    is_return: bool = False
    return_reason: str | None = None


class ShippingEvent(BaseModel):
    """One carrier tracking event (``in_transit``, ``out_for_delivery``, ...)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    status: str
    description: str
    event_date: datetime
    location: str | None = None
