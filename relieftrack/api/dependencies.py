"""FastAPI dependencies wiring services to the request's database session."""

from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from relieftrack.config import get_settings
from relieftrack.database import get_db
from relieftrack.services.activity_log import ActivityLogService
from relieftrack.services.distribution_ledger import DistributionLedger
from relieftrack.services.household_service import HouseholdService
from relieftrack.services.inventory_service import InventoryService


def get_actor(
    x_performed_by: Annotated[str | None, Header(max_length=255)] = None,
) -> str:
    """Name recorded as ``performed_by`` on activity rows.

    Taken from the ``X-Performed-By`` header, falling back to the configured
    default actor.
    """
    actor = (x_performed_by or "").strip()
    return actor or get_settings().default_actor


def get_activity_service(
    db: Annotated[Session, Depends(get_db)],
) -> ActivityLogService:
    """Get activity log service."""
    return ActivityLogService(db)


def get_inventory_service(
    db: Annotated[Session, Depends(get_db)],
    activity: Annotated[ActivityLogService, Depends(get_activity_service)],
) -> InventoryService:
    """Get inventory service with dependencies."""
    return InventoryService(db, activity)


def get_household_service(
    db: Annotated[Session, Depends(get_db)],
    activity: Annotated[ActivityLogService, Depends(get_activity_service)],
) -> HouseholdService:
    """Get household service with dependencies."""
    return HouseholdService(db, activity)


def get_distribution_ledger(
    db: Annotated[Session, Depends(get_db)],
    inventory: Annotated[InventoryService, Depends(get_inventory_service)],
    households: Annotated[HouseholdService, Depends(get_household_service)],
    activity: Annotated[ActivityLogService, Depends(get_activity_service)],
) -> DistributionLedger:
    """Get distribution ledger with dependencies."""
    return DistributionLedger(db, inventory, households, activity)
