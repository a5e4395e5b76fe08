"""Cross-domain contracts for customer support questions and replies."""

from pydantic import BaseModel, ConfigDict


class Question(BaseModel):
    """A customer question, optionally about a product or an order."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    customer_id: str | None = None
    subject: str
    message: str
    product_id: str | None = None
    product_name: str | None = None
    order_id: str | None = None
    order_number: str | None = None
    assigned_to: str | None = None


class Reply(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    user_id: str
    message: str
    is_admin: bool = False
    is_vendor: bool = False

    @property
    def is_staff(self) -> bool:
        return self.is_admin or self.is_vendor
