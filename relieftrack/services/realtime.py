"""Real-time activity feed using Redis pub/sub."""

import json
import logging
from collections.abc import AsyncIterator
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING

import redis
import redis.asyncio as aioredis

from relieftrack.config import get_settings
from relieftrack.schemas.activity_log import ActivityLogResponse

if TYPE_CHECKING:
    from redis.asyncio.client import PubSub

    from relieftrack.models.activity_log import ActivityLog

logger = logging.getLogger(__name__)
settings = get_settings()

ACTIVITY_CHANNEL = "activity_logs"


class ActivityEventType(StrEnum):
    """Event types for the activity feed."""

    ACTIVITY_CREATED = "activity_created"


# Synchronous Redis client for use in API endpoints
_sync_redis: redis.Redis | None = None


def get_sync_redis() -> redis.Redis:
    """Get synchronous Redis client for publishing from API endpoints."""
    global _sync_redis
    if _sync_redis is None:
        _sync_redis = redis.from_url(settings.redis_url)
    return _sync_redis


def publish_activity_event(log: "ActivityLog") -> None:
    """Publish a newly appended activity row to the feed channel.

    Called by the activity log service after the row is committed.
    """
    try:
        redis_client = get_sync_redis()
        message = {
            "type": ActivityEventType.ACTIVITY_CREATED,
            "timestamp": datetime.now(UTC).isoformat(),
            "data": ActivityLogResponse.model_validate(log).model_dump(mode="json"),
        }
        redis_client.publish(ACTIVITY_CHANNEL, json.dumps(message))
        logger.debug(f"Published activity {log.id} to {ACTIVITY_CHANNEL}")
    except Exception as e:
        # Don't fail the request if pub/sub fails
        logger.error(f"Failed to publish activity event: {e}")


class RealtimeService:
    """Async Redis pub/sub service for WebSocket connections."""

    def __init__(self) -> None:
        self._redis: aioredis.Redis | None = None
        self._pubsub: PubSub | None = None

    async def _get_redis(self) -> aioredis.Redis:
        if self._redis is None:
            self._redis = aioredis.from_url(settings.redis_url)
        return self._redis

    async def subscribe(self, channel: str = ACTIVITY_CHANNEL) -> AsyncIterator[dict]:
        """Subscribe to a Redis channel and yield messages."""
        redis_conn = await self._get_redis()
        self._pubsub = redis_conn.pubsub()
        await self._pubsub.subscribe(channel)

        try:
            async for message in self._pubsub.listen():
                if message["type"] == "message":
                    try:
                        data = json.loads(message["data"])
                        yield data
                    except json.JSONDecodeError:
                        logger.warning(f"Invalid JSON in pub/sub message: {message['data']}")
        finally:
            if self._pubsub:
                await self._pubsub.unsubscribe(channel)

    async def cleanup(self) -> None:
        """Clean up Redis connections."""
        if self._pubsub:
            await self._pubsub.close()
        if self._redis:
            await self._redis.close()
