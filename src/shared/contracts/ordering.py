"""Cross-domain contracts for orders as seen by the notifier.

Orders are owned by the Ordering service. These read-only shapes carry just
the fields the notification builders use; anything else on the order is
ignored.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class OrderItem(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    product_id: str
    name: str | None = None
    quantity: int = Field(default=1, ge=1)


class Order(BaseModel):
    """An order at the moment a business action completed."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    order_number: str
    customer_id: str
    status: str
    total_price: float
    items: list[OrderItem] = []
    created_at: datetime
    estimated_delivery_date: date | None = None
    tracking_number: str | None = None
    tracking_url: str | None = None
    delivered_at: datetime | None = None

    @property
    def product_ids(self) -> list[str]:
        return list(dict.fromkeys(item.product_id for item in self.items))
