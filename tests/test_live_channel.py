"""Tests for the in-process live update channel."""

import asyncio

import pytest

from fieldreports.events.live_channel import LiveUpdateChannel
from fieldreports.events.report_events import publish_event, report_updated_event


@pytest.mark.asyncio
async def test_publish_reaches_every_subscriber():
    channel = LiveUpdateChannel()
    async with channel.subscribe() as a, channel.subscribe() as b:
        delivered = await channel.publish({"type": "PING"})
        assert delivered == 2
        assert await a.next_event() == {"type": "PING"}
        assert await b.next_event() == {"type": "PING"}


@pytest.mark.asyncio
async def test_publish_without_subscribers():
    channel = LiveUpdateChannel()
    assert await channel.publish({"type": "PING"}) == 0


@pytest.mark.asyncio
async def test_late_subscriber_gets_no_replay():
    channel = LiveUpdateChannel()
    await channel.publish({"type": "EARLY"})
    async with channel.subscribe() as sub:
        assert sub.queue.empty()


@pytest.mark.asyncio
async def test_unsubscribe_removes_from_registry():
    channel = LiveUpdateChannel()
    async with channel.subscribe() as sub:
        assert channel.subscriber_count == 1
    assert channel.subscriber_count == 0
    assert sub.closed
    assert await channel.publish({"type": "PING"}) == 0


@pytest.mark.asyncio
async def test_full_subscriber_is_skipped():
    channel = LiveUpdateChannel(queue_size=1)
    async with channel.subscribe() as slow, channel.subscribe() as fast:
        assert await channel.publish({"n": 1}) == 2
        await fast.next_event()

        # slow still holds event 1; event 2 is dropped for it only
        assert await channel.publish({"n": 2}) == 1
        assert await fast.next_event() == {"n": 2}
        assert await slow.next_event() == {"n": 1}
        assert slow.queue.empty()


@pytest.mark.asyncio
async def test_closed_subscriber_is_skipped():
    channel = LiveUpdateChannel()
    async with channel.subscribe() as sub:
        sub.close()
        assert await channel.publish({"type": "PING"}) == 0


@pytest.mark.asyncio
async def test_events_keep_publish_order():
    channel = LiveUpdateChannel()
    async with channel.subscribe() as sub:
        for i in range(5):
            await channel.publish({"n": i})
        received = [await sub.next_event() for _ in range(5)]
    assert [e["n"] for e in received] == [0, 1, 2, 3, 4]


@pytest.mark.asyncio
async def test_concurrent_subscribe_and_publish():
    channel = LiveUpdateChannel()

    async def viewer():
        async with channel.subscribe():
            await asyncio.sleep(0)

    await asyncio.gather(*(viewer() for _ in range(20)), *(channel.publish({"n": i}) for i in range(20)))
    assert channel.subscriber_count == 0


class _BrokenChannel(LiveUpdateChannel):
    async def publish(self, event: dict) -> int:
        raise RuntimeError("boom")


@pytest.mark.asyncio
async def test_publish_event_swallows_delivery_errors():
    assert await publish_event(_BrokenChannel(), report_updated_event(1, "resolved")) == 0


@pytest.mark.asyncio
async def test_publish_event_without_channel():
    assert await publish_event(None, report_updated_event(1, "resolved")) == 0
