"""Distribution ledger: records hand-outs of relief goods to households."""

import logging

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, contains_eager

from relieftrack.models.distribution import Distribution
from relieftrack.models.enums import ActionType, EntityType
from relieftrack.models.household import Household
from relieftrack.models.inventory import InventoryItem
from relieftrack.schemas.activity_log import ActivityLogCreate, DistributionCreatedDetails
from relieftrack.schemas.distribution import DistributionFilter
from relieftrack.services.activity_log import ActivityLogService
from relieftrack.services.errors import (
    InsufficientStock,
    ReliefTrackError,
    StoreError,
    ValidationError,
)
from relieftrack.services.household_service import HouseholdService
from relieftrack.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)


class DistributionLedger:
    """Record distributions and keep inventory in step with them."""

    def __init__(
        self,
        db: Session,
        inventory: InventoryService,
        households: HouseholdService,
        activity: ActivityLogService,
    ):
        self.db = db
        self.inventory = inventory
        self.households = households
        self.activity = activity

    def list_distributions(self, filters: DistributionFilter | None = None) -> list[Distribution]:
        """List distributions with their household and item, newest first."""
        filters = filters or DistributionFilter()
        query = (
            self.db.query(Distribution)
            .join(Distribution.household)
            .join(Distribution.inventory)
            .options(
                contains_eager(Distribution.household),
                contains_eager(Distribution.inventory),
            )
        )
        if filters.purok is not None:
            query = query.filter(Household.purok == filters.purok.value)
        if filters.search:
            pattern = f"%{filters.search.strip()}%"
            query = query.filter(
                or_(
                    Household.household_number.ilike(pattern),
                    Household.head_of_family.ilike(pattern),
                    InventoryItem.item_name.ilike(pattern),
                )
            )
        return query.order_by(Distribution.distributed_at.desc(), Distribution.id.desc()).all()

    def record_distribution(
        self,
        household_id: int | None,
        inventory_id: int | None,
        quantity: int | None,
        distributed_by: str | None,
        notes: str | None = None,
    ) -> Distribution:
        """Hand out ``quantity`` of an inventory item to a household.

        The distribution row and the stock decrement commit together; if the
        decrement fails nothing is recorded. The activity entry is written
        afterwards and a failure there does not undo the distribution.

        Raises:
            ValidationError: a required field is missing or quantity < 1
            NotFoundError: the household or item does not exist
            InsufficientStock: quantity exceeds what is on hand
            StoreError: the database failed
        """
        if not household_id or not inventory_id or not (distributed_by or "").strip():
            raise ValidationError("Please fill in all required fields")
        if quantity is None or quantity < 1:
            raise ValidationError("Quantity must be at least 1")

        item = self.inventory.get_item(inventory_id)
        household = self.households.get_household(household_id)
        if quantity > item.quantity:
            raise InsufficientStock(item.item_name, quantity, item.quantity)

        distribution = Distribution(
            household_id=household.id,
            inventory_id=item.id,
            quantity_distributed=quantity,
            distributed_by=distributed_by.strip(),
            notes=notes or None,
        )
        try:
            self.db.add(distribution)
            self.db.flush()
            self.inventory.decrement(item.id, quantity, commit=False)
            self.db.commit()
        except ReliefTrackError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(str(e)) from e

        self.db.refresh(distribution)
        logger.info(
            f"Recorded distribution {distribution.id}: {quantity} x {item.item_name} "
            f"to {household.household_number}"
        )

        self.activity.append(
            ActivityLogCreate(
                action_type=ActionType.CREATE,
                entity_type=EntityType.DISTRIBUTION,
                entity_id=distribution.id,
                entity_name=f"{item.item_name} to {household.household_number}",
                performed_by=distribution.distributed_by,
                details=DistributionCreatedDetails(
                    quantity=quantity,
                    item=item.item_name,
                    household=household.household_number,
                    purok=household.purok,
                ),
            )
        )
        return distribution
