"""
Change feed and live queries.

Repositories publish a collection name after every committed write.
A live query re-runs its query on each publish for its collection and
hands the full result set to its consumer.  Only the latest state is
delivered: there is no queue of intermediate snapshots.

Consumers own the lifetime of their subscriptions and must call
:meth:`Subscription.cancel` when they stop listening.
"""

import logging
import threading
from typing import Callable, Generic, Optional, TypeVar

from app.core.errors import DataError

logger = logging.getLogger(__name__)

T = TypeVar("T")

USERS = "users"
TRAINING_LOGS = "training_logs"


class Subscription(Generic[T]):
    """A standing query bound to one collection of a :class:`ChangeFeed`."""

    def __init__(self, feed: "ChangeFeed", collection: str, query: Callable[[], list[T]],
                 on_change: Callable[[list[T]], None],
                 on_error: Optional[Callable[[Exception], None]] = None, ):
        self._feed = feed
        self.collection = collection
        self._query = query
        self._on_change = on_change
        self._on_error = on_error
        self._active = True
        # Serialises query + delivery so an older snapshot never lands after a newer one
        self._delivery_lock = threading.Lock()

    @property
    def active(self) -> bool:
        return self._active

    def refresh(self) -> None:
        """Re-run the query and deliver the result, or route the failure to ``on_error``."""
        with self._delivery_lock:
            if not self._active:
                return
            try:
                rows = self._query()
            except DataError as exc:
                if self._on_error is not None:
                    self._on_error(exc)
                else:
                    logger.error("Live query on %s failed: %s", self.collection, exc)
                return
            self._on_change(rows)

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self._feed.remove(self)


class ChangeFeed:
    """In-process publish/subscribe hub keyed by collection name."""

    def __init__(self):
        self._lock = threading.Lock()
        self._subscribers: dict[str, list[Subscription]] = {}

    def watch(self, collection: str, query: Callable[[], list[T]], on_change: Callable[[list[T]], None],
              on_error: Optional[Callable[[Exception], None]] = None, ) -> Subscription[T]:
        """Register a live query and deliver its current result immediately."""
        subscription = Subscription(self, collection, query, on_change, on_error)
        with self._lock:
            self._subscribers.setdefault(collection, []).append(subscription)
        try:
            subscription.refresh()
        except Exception:
            # the caller never receives a handle to cancel
            subscription.cancel()
            raise
        return subscription

    def publish(self, collection: str) -> None:
        with self._lock:
            subscribers = list(self._subscribers.get(collection, ()))
        for subscription in subscribers:
            try:
                subscription.refresh()
            except Exception:
                # the write is already committed; consumer errors stay with the consumer
                logger.exception("Subscriber callback on %s raised", collection)

    def remove(self, subscription: Subscription) -> None:
        with self._lock:
            subscribers = self._subscribers.get(subscription.collection, [])
            if subscription in subscribers:
                subscribers.remove(subscription)

    def subscriber_count(self, collection: str) -> int:
        with self._lock:
            return len(self._subscribers.get(collection, ()))
