"""Household API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from relieftrack.api.dependencies import get_actor, get_household_service
from relieftrack.models.enums import Purok
from relieftrack.schemas.household import (
    HouseholdCreate,
    HouseholdFilter,
    HouseholdResponse,
    HouseholdSummary,
    HouseholdUpdate,
)
from relieftrack.services.household_service import HouseholdService

router = APIRouter(prefix="/api/v1/households", tags=["households"])


@router.get("", response_model=list[HouseholdResponse])
def list_households(
    service: Annotated[HouseholdService, Depends(get_household_service)],
    purok: Purok | None = None,
    search: str | None = None,
):
    """List registered households."""
    return service.list_households(HouseholdFilter(purok=purok, search=search))


@router.get("/summary", response_model=HouseholdSummary)
def household_summary(
    service: Annotated[HouseholdService, Depends(get_household_service)],
    purok: Purok | None = None,
    search: str | None = None,
):
    """Total households and family members, optionally per purok."""
    return service.summary(HouseholdFilter(purok=purok, search=search))


@router.post("", response_model=HouseholdResponse, status_code=status.HTTP_201_CREATED)
def register_household(
    household_data: HouseholdCreate,
    service: Annotated[HouseholdService, Depends(get_household_service)],
    actor: Annotated[str, Depends(get_actor)],
):
    """Register a household. The household number must be unique."""
    return service.create_household(household_data, performed_by=actor)


@router.get("/{household_id}", response_model=HouseholdResponse)
def get_household(
    household_id: int,
    service: Annotated[HouseholdService, Depends(get_household_service)],
):
    """Get a specific household."""
    return service.get_household(household_id)


@router.put("/{household_id}", response_model=HouseholdResponse)
def update_household(
    household_id: int,
    household_data: HouseholdUpdate,
    service: Annotated[HouseholdService, Depends(get_household_service)],
    actor: Annotated[str, Depends(get_actor)],
):
    """Update a household."""
    return service.update_household(household_id, household_data, performed_by=actor)


@router.delete("/{household_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_household(
    household_id: int,
    service: Annotated[HouseholdService, Depends(get_household_service)],
    actor: Annotated[str, Depends(get_actor)],
):
    """Remove a household and its distribution history."""
    service.delete_household(household_id, performed_by=actor)
