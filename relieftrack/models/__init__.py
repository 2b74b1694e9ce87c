"""SQLAlchemy models."""

from relieftrack.models.activity_log import ActivityLog
from relieftrack.models.distribution import Distribution
from relieftrack.models.household import Household
from relieftrack.models.inventory import InventoryItem

__all__ = [
    "InventoryItem",
    "Household",
    "Distribution",
    "ActivityLog",
]
