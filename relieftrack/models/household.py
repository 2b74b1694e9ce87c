"""Household model."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from relieftrack.database import Base


class Household(Base):
    """Registered beneficiary household."""

    __tablename__ = "households"
    __table_args__ = (
        CheckConstraint("family_members >= 1", name="ck_households_family_members_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    household_number = Column(String(50), nullable=False, unique=True, index=True)
    head_of_family = Column(String(255), nullable=False)
    purok = Column(String(20), nullable=False, index=True)  # "Purok 1" .. "Purok 6"
    address = Column(String(500), nullable=False)
    contact_number = Column(String(50), nullable=True)
    family_members = Column(Integer, nullable=False, default=1)
    registered_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Relationships
    distributions = relationship(
        "Distribution",
        back_populates="household",
        cascade="all, delete-orphan",
    )
