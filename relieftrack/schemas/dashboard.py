"""Dashboard schemas."""

from pydantic import BaseModel

from relieftrack.schemas.inventory import InventoryItemResponse


class DashboardSummary(BaseModel):
    """Headline counts and the items that need restocking."""

    total_households: int
    total_inventory_items: int
    total_distributions: int
    total_activities: int
    low_stock_items: list[InventoryItemResponse]
