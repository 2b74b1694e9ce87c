"""Activity log service: append-only audit trail with a live feed."""

import logging
from collections.abc import Callable

from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from relieftrack.config import get_settings
from relieftrack.models.activity_log import ActivityLog
from relieftrack.models.enums import ActionType
from relieftrack.schemas.activity_log import ActivityCounts, ActivityLogCreate, ActivityLogFilter
from relieftrack.services.realtime import publish_activity_event

logger = logging.getLogger(__name__)


class ActivityLogService:
    """Append to and read the activity log.

    Appending never raises: a failed insert is logged and the mutation that
    triggered it stands. Each committed row is handed to ``publisher`` so live
    subscribers see it without re-querying.
    """

    def __init__(
        self,
        db: Session,
        publisher: Callable[[ActivityLog], None] | None = None,
    ):
        self.db = db
        self.publisher = publisher or publish_activity_event

    def append(self, entry: ActivityLogCreate) -> ActivityLog | None:
        """Insert an activity row. Returns None if the insert failed."""
        log = ActivityLog(
            action_type=entry.action_type.value,
            entity_type=entry.entity_type.value,
            entity_id=entry.entity_id,
            entity_name=entry.entity_name,
            performed_by=entry.performed_by,
            details=entry.details.model_dump(mode="json") if entry.details else None,
        )
        try:
            self.db.add(log)
            self.db.commit()
            self.db.refresh(log)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(
                "Activity log append failed for %s %s %s",
                entry.action_type,
                entry.entity_type,
                entry.entity_id,
            )
            return None

        self.publisher(log)
        return log

    def list_logs(
        self, filters: ActivityLogFilter | None = None, limit: int | None = None
    ) -> list[ActivityLog]:
        """List activity rows, newest first."""
        filters = filters or ActivityLogFilter()
        if limit is None:
            limit = get_settings().activity_feed_limit

        query = self.db.query(ActivityLog)
        if filters.entity_type is not None:
            query = query.filter(ActivityLog.entity_type == filters.entity_type.value)
        if filters.action_type is not None:
            query = query.filter(ActivityLog.action_type == filters.action_type.value)
        if filters.search:
            pattern = f"%{filters.search.strip()}%"
            query = query.filter(
                or_(
                    ActivityLog.entity_name.ilike(pattern),
                    ActivityLog.performed_by.ilike(pattern),
                )
            )

        return (
            query.order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
            .limit(limit)
            .all()
        )

    def counts(self) -> ActivityCounts:
        """Count activity rows per action type."""
        rows = (
            self.db.query(ActivityLog.action_type, func.count(ActivityLog.id))
            .group_by(ActivityLog.action_type)
            .all()
        )
        by_action = {action: count for action, count in rows}
        return ActivityCounts(
            create=by_action.get(ActionType.CREATE.value, 0),
            update=by_action.get(ActionType.UPDATE.value, 0),
            delete=by_action.get(ActionType.DELETE.value, 0),
            total=sum(by_action.values()),
        )
