"""Activity log API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from relieftrack.api.dependencies import get_activity_service
from relieftrack.models.enums import ActionType, EntityType
from relieftrack.schemas.activity_log import ActivityCounts, ActivityLogFilter, ActivityLogResponse
from relieftrack.services.activity_log import ActivityLogService

router = APIRouter(prefix="/api/v1/activity", tags=["activity"])


@router.get("", response_model=list[ActivityLogResponse])
def list_activity(
    service: Annotated[ActivityLogService, Depends(get_activity_service)],
    entity_type: EntityType | None = None,
    action_type: ActionType | None = None,
    search: str | None = None,
    limit: Annotated[int | None, Query(ge=1, le=1000)] = None,
):
    """List recent activity, newest first."""
    filters = ActivityLogFilter(entity_type=entity_type, action_type=action_type, search=search)
    return service.list_logs(filters, limit=limit)


@router.get("/counts", response_model=ActivityCounts)
def activity_counts(
    service: Annotated[ActivityLogService, Depends(get_activity_service)],
):
    """Number of activity rows per action type."""
    return service.counts()
