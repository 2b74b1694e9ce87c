"""Dashboard API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from relieftrack.api.dependencies import get_inventory_service
from relieftrack.database import get_db
from relieftrack.schemas.dashboard import DashboardSummary
from relieftrack.services.dashboard_service import get_dashboard_summary
from relieftrack.services.inventory_service import InventoryService

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardSummary)
def dashboard(
    db: Annotated[Session, Depends(get_db)],
    inventory: Annotated[InventoryService, Depends(get_inventory_service)],
):
    """Headline counts and low-stock items."""
    return get_dashboard_summary(db, inventory)
