"""Inventory store: relief-supply items and their on-hand quantities."""

import logging

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from relieftrack.models.enums import ActionType, EntityType
from relieftrack.models.inventory import InventoryItem
from relieftrack.schemas.activity_log import (
    ActivityLogCreate,
    InventoryCreatedDetails,
    InventoryDeletedDetails,
    InventoryUpdatedDetails,
)
from relieftrack.schemas.inventory import InventoryFilter, InventoryItemCreate, InventoryItemUpdate
from relieftrack.services.activity_log import ActivityLogService
from relieftrack.services.errors import (
    InsufficientStock,
    NotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class InventoryService:
    """Service for inventory operations."""

    def __init__(self, db: Session, activity: ActivityLogService):
        self.db = db
        self.activity = activity

    def list_items(self, filters: InventoryFilter | None = None) -> list[InventoryItem]:
        """List inventory items, newest first.

        ``in_stock_only`` lists what can be handed out (quantity above zero),
        ordered by name for the distribution form.
        """
        filters = filters or InventoryFilter()
        query = self.db.query(InventoryItem)

        if filters.category is not None:
            query = query.filter(InventoryItem.category == filters.category.value)
        if filters.search:
            query = query.filter(InventoryItem.item_name.ilike(f"%{filters.search.strip()}%"))
        if filters.low_stock_only:
            query = query.filter(InventoryItem.quantity < InventoryItem.low_stock_threshold)

        if filters.in_stock_only:
            query = query.filter(InventoryItem.quantity > 0).order_by(InventoryItem.item_name)
        else:
            query = query.order_by(InventoryItem.created_at.desc(), InventoryItem.id.desc())
        return query.all()

    def low_stock_items(self) -> list[InventoryItem]:
        """Items below their threshold, scarcest first."""
        return (
            self.db.query(InventoryItem)
            .filter(InventoryItem.quantity < InventoryItem.low_stock_threshold)
            .order_by(InventoryItem.quantity, InventoryItem.item_name)
            .all()
        )

    def get_item(self, item_id: int) -> InventoryItem:
        item = self.db.query(InventoryItem).filter(InventoryItem.id == item_id).first()
        if not item:
            raise NotFoundError("Inventory item not found")
        return item

    def create_item(self, data: InventoryItemCreate, performed_by: str) -> InventoryItem:
        """Add an item to inventory."""
        item = InventoryItem(
            item_name=data.item_name,
            category=data.category.value,
            quantity=data.quantity,
            unit=data.unit,
            low_stock_threshold=data.low_stock_threshold,
        )
        self.db.add(item)
        self._commit()
        self.db.refresh(item)
        logger.info(f"Created inventory item {item.id} ({item.item_name})")

        self.activity.append(
            ActivityLogCreate(
                action_type=ActionType.CREATE,
                entity_type=EntityType.INVENTORY,
                entity_id=item.id,
                entity_name=item.item_name,
                performed_by=performed_by,
                details=InventoryCreatedDetails(category=item.category, quantity=item.quantity),
            )
        )
        return item

    def update_item(
        self, item_id: int, data: InventoryItemUpdate, performed_by: str
    ) -> InventoryItem:
        """Update an item. Only fields present in ``data`` are changed."""
        item = self.get_item(item_id)
        previous_quantity = item.quantity

        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            setattr(item, field, value.value if field == "category" else value)

        self._commit()
        self.db.refresh(item)
        logger.info(f"Updated inventory item {item.id} ({item.item_name})")

        self.activity.append(
            ActivityLogCreate(
                action_type=ActionType.UPDATE,
                entity_type=EntityType.INVENTORY,
                entity_id=item.id,
                entity_name=item.item_name,
                performed_by=performed_by,
                details=InventoryUpdatedDetails(
                    previous_quantity=previous_quantity, new_quantity=item.quantity
                ),
            )
        )
        return item

    def delete_item(self, item_id: int, performed_by: str) -> None:
        """Remove an item from inventory."""
        item = self.get_item(item_id)
        item_name = item.item_name
        category = item.category

        self.db.delete(item)
        self._commit()
        logger.info(f"Deleted inventory item {item_id} ({item_name})")

        self.activity.append(
            ActivityLogCreate(
                action_type=ActionType.DELETE,
                entity_type=EntityType.INVENTORY,
                entity_id=item_id,
                entity_name=item_name,
                performed_by=performed_by,
                details=InventoryDeletedDetails(category=category),
            )
        )

    def decrement(self, item_id: int, amount: int, *, commit: bool = True) -> None:
        """Take ``amount`` off an item's quantity.

        The write only applies while the stored quantity still covers
        ``amount``, so two concurrent hand-outs cannot drive it below zero.
        On failure the session is rolled back. With ``commit=False`` the
        caller owns the transaction.
        """
        if amount < 1:
            raise ValidationError("Quantity must be at least 1")

        item = self.get_item(item_id)
        if amount > item.quantity:
            raise InsufficientStock(item.item_name, amount, item.quantity)

        try:
            result = self.db.execute(
                update(InventoryItem)
                .where(InventoryItem.id == item_id, InventoryItem.quantity >= amount)
                .values(quantity=InventoryItem.quantity - amount)
                .execution_options(synchronize_session=False)
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(str(e)) from e

        if result.rowcount == 0:
            # Stock changed between the read above and the guarded write
            self.db.rollback()
            self.db.refresh(item)
            raise InsufficientStock(item.item_name, amount, item.quantity)

        self.db.expire(item, ["quantity", "updated_at"])
        if commit:
            self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise StoreError(str(e.orig)) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(str(e)) from e
