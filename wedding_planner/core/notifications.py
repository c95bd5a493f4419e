"""Thread-safe publish/subscribe channel that signals "collection X changed" to connected clients."""
import asyncio
import threading
import logging
from typing import Optional

from wedding_planner.config import settings

logger = logging.getLogger(__name__)

COLLECTIONS = ("tasks", "vendors", "guests", "profiles")
EVENTS = ("INSERT", "UPDATE", "DELETE")

ALL_OWNERS = "*"


class Subscription:
    def __init__(self, key: str, loop: asyncio.AbstractEventLoop, maxsize: int):
        self.key = key
        self.loop = loop
        self.queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)

    def _deliver(self, message: dict) -> None:
        try:
            self.queue.put_nowait(message)
        except asyncio.QueueFull:
            # Consumer re-fetches on the next message anyway
            logger.warning(f"Change queue full for subscriber {self.key}; dropping {message['collection']} event")

    async def get(self) -> dict:
        return await self.queue.get()


class ChangeNotifier:
    def __init__(self, maxsize: Optional[int] = None):
        self._lock = threading.Lock()
        self._subscriptions: dict[str, list[Subscription]] = {}
        self._maxsize = maxsize if maxsize is not None else settings.change_queue_size

    def subscribe(self, owner_id: str, all_owners: bool = False) -> Subscription:
        """Register a subscriber on the running loop. Admin subscribers pass all_owners=True."""
        key = ALL_OWNERS if all_owners else owner_id
        subscription = Subscription(key, asyncio.get_running_loop(), self._maxsize)
        with self._lock:
            self._subscriptions.setdefault(key, []).append(subscription)
        logger.debug(f"Subscribed to changes for {key}")
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            subscribers = self._subscriptions.get(subscription.key, [])
            if subscription in subscribers:
                subscribers.remove(subscription)
            if not subscribers:
                self._subscriptions.pop(subscription.key, None)
        logger.debug(f"Unsubscribed from changes for {subscription.key}")

    def subscriber_count(self, owner_id: Optional[str] = None) -> int:
        with self._lock:
            if owner_id is None:
                return sum(len(s) for s in self._subscriptions.values())
            return len(self._subscriptions.get(owner_id, []))

    def publish(self, collection: str, event: str, owner_id: str) -> int:
        """Notify the owner's and admin subscribers that a collection changed. Safe to call from any thread."""
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {collection}")
        if event not in EVENTS:
            raise ValueError(f"Unknown event: {event}")
        message = {"collection": collection, "event": event, "owner_id": owner_id}
        with self._lock:
            targets = list(self._subscriptions.get(owner_id, []))
            if owner_id != ALL_OWNERS:
                targets += self._subscriptions.get(ALL_OWNERS, [])
        for subscription in targets:
            try:
                subscription.loop.call_soon_threadsafe(subscription._deliver, message)
            except RuntimeError:
                # Loop already closed; the websocket is gone
                self.unsubscribe(subscription)
        if targets:
            logger.debug(f"Published {event} on {collection} to {len(targets)} subscriber(s)")
        return len(targets)


notifier = ChangeNotifier()


def get_notifier() -> ChangeNotifier:
    return notifier
