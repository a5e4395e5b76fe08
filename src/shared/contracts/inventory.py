"""Cross-domain contract for inventory threshold alerts."""

from pydantic import BaseModel, ConfigDict


class InventoryAlert(BaseModel):
    """Stock for a product/material/color combination crossed its threshold.

    Product, material and color names are resolved by the Inventory service
    before the alert is handed over.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    product_id: str
    product_name: str
    material_name: str | None = None
    color_name: str | None = None
    current_level: int
    threshold: int
