"""Live update subscriptions: WebSocket and Server-Sent Events."""

import asyncio
import json
import logging
from typing import AsyncGenerator

from fastapi import APIRouter, Request, WebSocket, WebSocketDisconnect
from fastapi.responses import StreamingResponse

from fieldreports.config import settings
from fieldreports.events.live_channel import LiveUpdateChannel, Subscription
from fieldreports.events.report_events import connected_event

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Stream"])

# Mounted at the application root, where the submission/archive clients connect
ws_router = APIRouter()


def _format_sse(event: dict) -> str:
    return f"data: {json.dumps(event, ensure_ascii=False)}\n\n"


async def _event_generator(
    request: Request,
    channel: LiveUpdateChannel,
    keepalive_seconds: float,
) -> AsyncGenerator[str, None]:
    """Yield SSE-formatted events for one viewer until it disconnects."""
    async with channel.subscribe() as subscription:
        yield _format_sse(connected_event())

        while True:
            if await request.is_disconnected():
                break
            try:
                event = await asyncio.wait_for(subscription.next_event(), timeout=keepalive_seconds)
            except asyncio.TimeoutError:
                yield ": keepalive\n\n"
                continue
            yield _format_sse(event)


@router.get("/stream/events")
async def stream_events(request: Request):
    """Stream report events via SSE."""
    channel: LiveUpdateChannel = request.app.state.live_channel

    return StreamingResponse(
        _event_generator(request, channel, settings.sse_keepalive_seconds),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
            "Connection": "keep-alive",
        },
    )


async def _forward_events(websocket: WebSocket, subscription: Subscription) -> None:
    while True:
        event = await subscription.next_event()
        try:
            await websocket.send_json(event)
        except Exception as exc:
            # Socket went away mid-send; the receive loop will see the disconnect
            logger.debug("Live subscriber %d send failed: %s", subscription.subscription_id, exc)
            return


@ws_router.websocket("/ws")
async def live_updates(websocket: WebSocket):
    """Push report events to a viewer. Frames sent by the viewer are ignored."""
    channel: LiveUpdateChannel = websocket.app.state.live_channel
    await websocket.accept()

    async with channel.subscribe() as subscription:
        await websocket.send_json(connected_event())
        forwarder = asyncio.create_task(_forward_events(websocket, subscription))
        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    break
        except WebSocketDisconnect:
            pass
        finally:
            forwarder.cancel()
            await asyncio.gather(forwarder, return_exceptions=True)
