"""Inventory schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from relieftrack.models.enums import ItemCategory, StockStatus


class InventoryItemCreate(BaseModel):
    """Create an inventory item."""

    item_name: str = Field(..., min_length=1, max_length=255)
    category: ItemCategory = ItemCategory.FOOD_PACK
    quantity: int = Field(0, ge=0)
    unit: str = Field("pcs", min_length=1, max_length=50)
    low_stock_threshold: int = Field(10, ge=0)


class InventoryItemUpdate(BaseModel):
    """Update an inventory item."""

    item_name: str | None = Field(None, min_length=1, max_length=255)
    category: ItemCategory | None = None
    quantity: int | None = Field(None, ge=0)
    unit: str | None = Field(None, min_length=1, max_length=50)
    low_stock_threshold: int | None = Field(None, ge=0)


class InventoryFilter(BaseModel):
    """Query filters for listing inventory."""

    category: ItemCategory | None = None
    search: str | None = None
    low_stock_only: bool = False
    in_stock_only: bool = False


class InventoryItemResponse(BaseModel):
    """Inventory item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    item_name: str
    category: ItemCategory
    quantity: int
    unit: str
    low_stock_threshold: int
    stock_status: StockStatus
    is_low_stock: bool
    created_at: datetime
    updated_at: datetime
