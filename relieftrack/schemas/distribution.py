"""Distribution schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from relieftrack.models.enums import ItemCategory, Purok


class DistributionCreate(BaseModel):
    """Record a distribution."""

    household_id: int
    inventory_id: int
    quantity_distributed: int = Field(1, ge=1)
    distributed_by: str = Field(..., max_length=255)
    notes: str | None = Field(None, max_length=2000)


class DistributionFilter(BaseModel):
    """Query filters for listing distributions."""

    purok: Purok | None = None
    search: str | None = None


class DistributionHouseholdRef(BaseModel):
    """Household fields shown alongside a distribution."""

    model_config = ConfigDict(from_attributes=True)

    household_number: str
    head_of_family: str
    purok: Purok


class DistributionItemRef(BaseModel):
    """Inventory fields shown alongside a distribution."""

    model_config = ConfigDict(from_attributes=True)

    item_name: str
    unit: str
    category: ItemCategory


class DistributionResponse(BaseModel):
    """Distribution response with its household and item."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    household_id: int
    inventory_id: int
    quantity_distributed: int
    distributed_by: str
    distributed_at: datetime
    notes: str | None
    household: DistributionHouseholdRef | None = None
    inventory: DistributionItemRef | None = None
