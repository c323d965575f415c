"""Report lifecycle events pushed to live viewers."""

import logging

from fieldreports.events.live_channel import LiveUpdateChannel
from fieldreports.models.enums import LiveEventType

logger = logging.getLogger(__name__)


def connected_event() -> dict:
    return {"type": LiveEventType.CONNECTED.value}


def report_created_event(report: dict) -> dict:
    return {"type": LiveEventType.NEW_REPORT.value, "report": report}


def report_updated_event(report_id: int, status: str) -> dict:
    return {"type": LiveEventType.UPDATE_REPORT.value, "id": report_id, "status": status}


async def publish_event(channel: LiveUpdateChannel | None, event: dict) -> int:
    """Publish an event, never letting a delivery problem reach the caller.

    Args:
        channel: The app's live update channel (None when live updates are off)
        event: JSON-serialisable event dict with a ``type`` key
    """
    if channel is None:
        return 0
    try:
        delivered = await channel.publish(event)
    except Exception as exc:
        logger.warning("Failed to publish live event %s: %s", event.get("type"), exc)
        return 0
    logger.debug("Published %s to %d subscriber(s)", event.get("type"), delivered)
    return delivered
