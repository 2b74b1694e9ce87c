"""Tests for the real-time activity feed."""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from relieftrack.services.realtime import (
    ACTIVITY_CHANNEL,
    ActivityEventType,
    RealtimeService,
    get_sync_redis,
    publish_activity_event,
)


class TestGetSyncRedis:
    """Tests for get_sync_redis function."""

    def test_creates_redis_client(self):
        """Test that get_sync_redis creates a Redis client once."""
        import relieftrack.services.realtime as realtime_module

        realtime_module._sync_redis = None

        with patch("relieftrack.services.realtime.redis.from_url") as mock_from_url:
            mock_client = MagicMock()
            mock_from_url.return_value = mock_client

            # mock_redis patches the module attribute; this is the unpatched function
            assert get_sync_redis() == mock_client
            assert get_sync_redis() == mock_client
            mock_from_url.assert_called_once()

        realtime_module._sync_redis = None


class TestPublishActivityEvent:
    """Tests for publish_activity_event function."""

    def test_publishes_row(self, activity, mock_redis):
        """Test that the row is published on the activity channel."""
        from relieftrack.models.enums import ActionType, EntityType
        from relieftrack.schemas.activity_log import ActivityLogCreate

        log = activity.append(
            ActivityLogCreate(
                action_type=ActionType.CREATE,
                entity_type=EntityType.HOUSEHOLD,
                entity_id=3,
                entity_name="HH-003 - Ana Dela Cruz",
                performed_by="Admin User",
            )
        )
        mock_redis.reset_mock()

        publish_activity_event(log)

        mock_redis.publish.assert_called_once()
        channel, payload = mock_redis.publish.call_args[0]
        assert channel == ACTIVITY_CHANNEL
        message = json.loads(payload)
        assert message["type"] == ActivityEventType.ACTIVITY_CREATED
        assert message["data"]["entity_type"] == "household"
        assert message["data"]["details"] is None
        assert "timestamp" in message

    def test_handles_redis_error_gracefully(self, activity, mock_redis):
        """Test that Redis errors don't fail the append."""
        from relieftrack.models.enums import ActionType, EntityType
        from relieftrack.schemas.activity_log import ActivityLogCreate

        mock_redis.publish.side_effect = Exception("Redis connection failed")

        log = activity.append(
            ActivityLogCreate(
                action_type=ActionType.DELETE,
                entity_type=EntityType.INVENTORY,
                entity_name="Blanket",
                performed_by="Admin User",
            )
        )

        assert log is not None


class TestRealtimeService:
    """Tests for RealtimeService class."""

    def test_init(self):
        """Test RealtimeService initialization."""
        service = RealtimeService()
        assert service._redis is None
        assert service._pubsub is None

    @pytest.mark.asyncio
    async def test_get_redis_creates_connection(self):
        """Test that _get_redis creates a Redis connection."""
        service = RealtimeService()

        with patch("relieftrack.services.realtime.aioredis.from_url") as mock_from_url:
            mock_redis = AsyncMock()
            mock_from_url.return_value = mock_redis

            result = await service._get_redis()

            assert result == mock_redis
            mock_from_url.assert_called_once()

    @pytest.mark.asyncio
    async def test_cleanup_closes_connections(self):
        """Test that cleanup closes Redis connections."""
        service = RealtimeService()
        mock_redis = AsyncMock()
        mock_pubsub = AsyncMock()
        service._redis = mock_redis
        service._pubsub = mock_pubsub

        await service.cleanup()

        mock_pubsub.close.assert_called_once()
        mock_redis.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_cleanup_handles_no_connections(self):
        """Test that cleanup works when no connections exist."""
        service = RealtimeService()
        await service.cleanup()

    @pytest.mark.asyncio
    async def test_subscribe_skips_non_messages_and_invalid_json(self):
        """Test that only valid JSON messages are yielded."""
        service = RealtimeService()

        mock_redis = MagicMock()
        mock_pubsub = MagicMock()
        valid_message = {"type": "activity_created", "data": {"id": 1}}

        async def mock_listen():
            yield {"type": "subscribe", "data": 1}
            yield {"type": "message", "data": "not valid json"}
            yield {"type": "message", "data": json.dumps(valid_message)}

        mock_pubsub.listen = mock_listen
        mock_pubsub.subscribe = AsyncMock()
        mock_pubsub.unsubscribe = AsyncMock()
        mock_redis.pubsub.return_value = mock_pubsub
        service._redis = mock_redis

        messages = [msg async for msg in service.subscribe()]

        assert messages == [valid_message]
        mock_pubsub.subscribe.assert_awaited_once_with(ACTIVITY_CHANNEL)
        mock_pubsub.unsubscribe.assert_awaited_once_with(ACTIVITY_CHANNEL)


class TestActivityFeedWebSocket:
    """Tests for the live activity WebSocket."""

    def test_forwards_published_rows(self, client):
        """Test that each message from the channel reaches the client."""
        message = {"type": "activity_created", "data": {"id": 42, "entity_name": "Rice Pack"}}
        cleanup = AsyncMock()

        class FakeRealtimeService:
            async def subscribe(self, channel):
                assert channel == ACTIVITY_CHANNEL
                yield message

            async def cleanup(self):
                await cleanup()

        with (
            patch("relieftrack.api.websocket.RealtimeService", FakeRealtimeService),
            client.websocket_connect("/api/v1/ws/activity") as ws,
        ):
            assert ws.receive_json() == message

        cleanup.assert_awaited_once()

    def test_disconnect_unsubscribes_before_closing(self, client):
        """Test the subscription is released before the pubsub is closed."""
        message = {"type": "activity_created", "data": {"id": 7}}
        events = []
        closed = False

        async def listen():
            yield {"type": "message", "data": json.dumps(message)}
            await asyncio.Event().wait()

        async def unsubscribe(channel):
            events.append(("unsubscribe", "after_close" if closed else "before_close"))

        async def close():
            nonlocal closed
            closed = True
            events.append(("close",))

        pubsub = MagicMock()
        pubsub.subscribe = AsyncMock()
        pubsub.listen = listen
        pubsub.unsubscribe = unsubscribe
        pubsub.close = close
        redis_conn = MagicMock()
        redis_conn.pubsub.return_value = pubsub
        redis_conn.close = AsyncMock()

        with (
            patch("relieftrack.services.realtime.aioredis.from_url", return_value=redis_conn),
            client.websocket_connect("/api/v1/ws/activity") as ws,
        ):
            assert ws.receive_json() == message
            # A frame that is not JSON ends the client side of the feed
            ws.send_text("not json")

        assert events == [("unsubscribe", "before_close"), ("close",)]
        redis_conn.close.assert_awaited_once()
