"""Inventory item model."""

from sqlalchemy import CheckConstraint, Column, Integer, String
from sqlalchemy.orm import relationship

from relieftrack.database import Base
from relieftrack.models.enums import ItemCategory, StockStatus
from relieftrack.models.mixins import TimestampMixin


class InventoryItem(Base, TimestampMixin):
    """Relief supply item with its on-hand quantity."""

    __tablename__ = "inventory"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
        CheckConstraint("low_stock_threshold >= 0", name="ck_inventory_threshold_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    item_name = Column(String(255), nullable=False)
    category = Column(String(50), nullable=False, default=ItemCategory.FOOD_PACK.value)
    quantity = Column(Integer, nullable=False, default=0)
    unit = Column(String(50), nullable=False, default="pcs")
    low_stock_threshold = Column(Integer, nullable=False, default=10)

    # Distribution history is never rewritten; the foreign key refuses the delete
    distributions = relationship("Distribution", back_populates="inventory", passive_deletes="all")

    @property
    def stock_status(self) -> StockStatus:
        """Low stock when quantity is strictly below the threshold."""
        return StockStatus.classify(self.quantity, self.low_stock_threshold)

    @property
    def is_low_stock(self) -> bool:
        return self.stock_status == StockStatus.LOW_STOCK
