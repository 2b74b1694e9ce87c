"""Pydantic schemas for API requests and responses."""

from relieftrack.schemas.activity_log import (
    ActivityCounts,
    ActivityLogCreate,
    ActivityLogFilter,
    ActivityLogResponse,
)
from relieftrack.schemas.dashboard import DashboardSummary
from relieftrack.schemas.distribution import (
    DistributionCreate,
    DistributionFilter,
    DistributionResponse,
)
from relieftrack.schemas.household import (
    HouseholdCreate,
    HouseholdFilter,
    HouseholdResponse,
    HouseholdSummary,
    HouseholdUpdate,
)
from relieftrack.schemas.inventory import (
    InventoryFilter,
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
)

__all__ = [
    "InventoryItemCreate",
    "InventoryItemUpdate",
    "InventoryFilter",
    "InventoryItemResponse",
    "HouseholdCreate",
    "HouseholdUpdate",
    "HouseholdFilter",
    "HouseholdResponse",
    "HouseholdSummary",
    "DistributionCreate",
    "DistributionFilter",
    "DistributionResponse",
    "ActivityLogCreate",
    "ActivityLogFilter",
    "ActivityLogResponse",
    "ActivityCounts",
    "DashboardSummary",
]
