"""Household schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from relieftrack.models.enums import Purok


class HouseholdCreate(BaseModel):
    """Register a household."""

    household_number: str = Field(..., min_length=1, max_length=50)
    head_of_family: str = Field(..., min_length=1, max_length=255)
    purok: Purok = Purok.PUROK_1
    address: str = Field(..., min_length=1, max_length=500)
    contact_number: str | None = Field(None, max_length=50)
    family_members: int = Field(1, ge=1)


class HouseholdUpdate(BaseModel):
    """Update a household."""

    household_number: str | None = Field(None, min_length=1, max_length=50)
    head_of_family: str | None = Field(None, min_length=1, max_length=255)
    purok: Purok | None = None
    address: str | None = Field(None, min_length=1, max_length=500)
    contact_number: str | None = Field(None, max_length=50)
    family_members: int | None = Field(None, ge=1)


class HouseholdFilter(BaseModel):
    """Query filters for listing households."""

    purok: Purok | None = None
    search: str | None = None


class HouseholdResponse(BaseModel):
    """Household response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    household_number: str
    head_of_family: str
    purok: Purok
    address: str
    contact_number: str | None
    family_members: int
    registered_at: datetime
    updated_at: datetime


class HouseholdSummary(BaseModel):
    """Totals for a filtered set of households."""

    total_households: int
    total_family_members: int
