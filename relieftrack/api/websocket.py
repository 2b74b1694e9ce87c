"""WebSocket endpoint for the live activity feed."""

import asyncio
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from relieftrack.services.realtime import ACTIVITY_CHANNEL, RealtimeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/ws", tags=["websocket"])

PING_INTERVAL_SECONDS = 30


@router.websocket("/activity")
async def websocket_activity_feed(websocket: WebSocket) -> None:
    """Push each new activity row to the client as it is appended.

    Clients load the initial page from ``GET /api/v1/activity`` and prepend
    rows received here. The Redis subscription lives as long as the socket.
    """
    realtime_service = RealtimeService()

    try:
        await websocket.accept()
        logger.info("Activity feed connected")

        async def handle_messages() -> None:
            """Receive messages from Redis and forward to WebSocket."""
            async for message in realtime_service.subscribe(ACTIVITY_CHANNEL):
                try:
                    await websocket.send_json(message)
                except WebSocketDisconnect:
                    break
                except Exception as e:
                    logger.error(f"Error sending WebSocket message: {e}")
                    break

        async def handle_ping() -> None:
            """Send periodic pings to keep connection alive."""
            while True:
                try:
                    await asyncio.sleep(PING_INTERVAL_SECONDS)
                    await websocket.send_json({"type": "ping"})
                except Exception:
                    break

        async def handle_client() -> None:
            """Handle incoming messages from client (pong responses)."""
            while True:
                try:
                    data = await websocket.receive_json()
                    if data.get("type") == "pong":
                        continue  # Keepalive acknowledgment
                except WebSocketDisconnect:
                    break
                except Exception:
                    break

        # The feed ends as soon as any side stops
        tasks = [
            asyncio.create_task(handle_messages()),
            asyncio.create_task(handle_ping()),
            asyncio.create_task(handle_client()),
        ]
        _, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()
        # Let the subscription unsubscribe before cleanup closes the pubsub
        await asyncio.gather(*pending, return_exceptions=True)

    except WebSocketDisconnect:
        logger.info("Activity feed disconnected")
    except Exception as e:
        logger.error(f"WebSocket error: {e}", exc_info=True)
    finally:
        await realtime_service.cleanup()
