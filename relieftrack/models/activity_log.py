"""Activity log model."""

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.dialects.postgresql import JSON

from relieftrack.database import Base


class ActivityLog(Base):
    """Append-only audit row for a create/update/delete on another entity."""

    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, index=True)
    action_type = Column(String(20), nullable=False, index=True)  # create | update | delete
    # inventory | household | distribution
    entity_type = Column(String(20), nullable=False, index=True)
    entity_id = Column(Integer, nullable=True)
    entity_name = Column(String(500), nullable=False)
    performed_by = Column(String(255), nullable=False)
    # Tagged payload, see relieftrack.schemas.activity_log.ActivityDetails
    details = Column(JSON, nullable=True)
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
