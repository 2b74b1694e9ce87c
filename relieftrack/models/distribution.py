"""Distribution model."""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from relieftrack.database import Base


class Distribution(Base):
    """A single hand-out of one inventory item to one household."""

    __tablename__ = "distributions"
    __table_args__ = (
        CheckConstraint("quantity_distributed >= 1", name="ck_distributions_quantity_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    household_id = Column(
        Integer, ForeignKey("households.id", ondelete="CASCADE"), nullable=False, index=True
    )
    inventory_id = Column(Integer, ForeignKey("inventory.id"), nullable=False, index=True)
    quantity_distributed = Column(Integer, nullable=False)
    distributed_by = Column(String(255), nullable=False)
    distributed_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    notes = Column(String, nullable=True)

    # Relationships
    household = relationship("Household", back_populates="distributions")
    inventory = relationship("InventoryItem", back_populates="distributions")
