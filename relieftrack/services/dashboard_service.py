"""Headline numbers for the landing page."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from relieftrack.models.activity_log import ActivityLog
from relieftrack.models.distribution import Distribution
from relieftrack.models.household import Household
from relieftrack.models.inventory import InventoryItem
from relieftrack.schemas.dashboard import DashboardSummary
from relieftrack.schemas.inventory import InventoryItemResponse
from relieftrack.services.inventory_service import InventoryService


def _count(db: Session, column) -> int:
    return db.query(func.count(column)).scalar() or 0


def get_dashboard_summary(db: Session, inventory: InventoryService) -> DashboardSummary:
    """Count every table and list the items that need restocking."""
    return DashboardSummary(
        total_households=_count(db, Household.id),
        total_inventory_items=_count(db, InventoryItem.id),
        total_distributions=_count(db, Distribution.id),
        total_activities=_count(db, ActivityLog.id),
        low_stock_items=[
            InventoryItemResponse.model_validate(item) for item in inventory.low_stock_items()
        ],
    )
