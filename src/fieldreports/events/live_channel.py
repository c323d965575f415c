"""In-process live update channel.

A publish-only fan-out from write operations to connected viewers. Nothing is
stored: a subscriber that connects after an event never sees it, and a
subscriber that is closed or has a full queue is skipped for that event.
"""

import asyncio
import itertools
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_subscription_ids = itertools.count(1)


@dataclass(eq=False)
class Subscription:
    """One connected viewer session."""

    queue: asyncio.Queue
    subscription_id: int = field(default_factory=lambda: next(_subscription_ids))
    closed: bool = False

    def offer(self, event: dict) -> bool:
        """Hand an event to this subscriber without waiting."""
        if self.closed:
            return False
        try:
            self.queue.put_nowait(event)
        except asyncio.QueueFull:
            return False
        return True

    async def next_event(self) -> dict:
        return await self.queue.get()

    def close(self) -> None:
        self.closed = True


class LiveUpdateChannel:
    """Registry of active subscriptions with best-effort broadcast."""

    def __init__(self, queue_size: int = 100) -> None:
        self._queue_size = queue_size
        self._subscriptions: set[Subscription] = set()
        self._lock = asyncio.Lock()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    async def add(self) -> Subscription:
        subscription = Subscription(queue=asyncio.Queue(maxsize=self._queue_size))
        async with self._lock:
            self._subscriptions.add(subscription)
        logger.info("Live subscriber connected (id=%d, total=%d)", subscription.subscription_id, self.subscriber_count)
        return subscription

    async def remove(self, subscription: Subscription) -> None:
        subscription.close()
        async with self._lock:
            self._subscriptions.discard(subscription)
        logger.info("Live subscriber disconnected (id=%d, total=%d)", subscription.subscription_id, self.subscriber_count)

    @asynccontextmanager
    async def subscribe(self) -> AsyncIterator[Subscription]:
        """Register a subscription for the lifetime of the ``async with`` block."""
        subscription = await self.add()
        try:
            yield subscription
        finally:
            await self.remove(subscription)

    async def publish(self, event: dict) -> int:
        """Offer ``event`` to every open subscription.

        Returns the number of subscriptions that accepted it.
        """
        async with self._lock:
            targets = list(self._subscriptions)

        delivered = 0
        for subscription in targets:
            if subscription.offer(event):
                delivered += 1
            else:
                logger.debug("Skipped live subscriber %d for %s", subscription.subscription_id, event.get("type"))
        return delivered
