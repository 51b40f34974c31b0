"""
Notification Service

In-app notifications for a single user:
- Ordered collection (newest first) with a one-way unread -> read transition
- Persistence through the key-value store, one JSON document per user
- Helper used by producing features (test generation, errors, system events)
"""

import logging
from typing import Callable, Dict, List, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from app.core.config import settings
from app.schemas.notification import (
    Notification,
    NotificationCategory,
    NotificationCreate,
)
from app.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

_notification_list = TypeAdapter(List[Notification])

T = TypeVar("T")


class NotificationServiceError(Exception):
    pass


class NotificationNotFoundError(NotificationServiceError):
    pass


class DuplicateNotificationError(NotificationServiceError):
    pass


class NotificationStore:
    """
    In-memory notification collection.

    Notifications are kept in insertion order. ``list()`` sorts by date,
    newest first; notifications with the same date keep insertion order.

    Args:
        notifications: Initial contents, in insertion order
        max_items: Retention limit; None keeps everything
    """

    def __init__(
        self,
        notifications: Optional[List[Notification]] = None,
        max_items: Optional[int] = None,
    ):
        if max_items is not None and max_items < 1:
            raise ValueError("max_items must be at least 1")
        self.max_items = max_items
        self._items: Dict[str, Notification] = {}
        for notification in notifications or []:
            self.add(notification)
        # Set by every mutation that has to be persisted
        self.changed = False

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, notification_id: str) -> bool:
        return notification_id in self._items

    def list(self) -> List[Notification]:
        # sorted() is stable with reverse=True, ties stay in insertion order
        ordered = sorted(self._items.values(), key=lambda n: n.date, reverse=True)
        return [n.model_copy() for n in ordered]

    def get(self, notification_id: str) -> Notification:
        notification = self._items.get(notification_id)
        if notification is None:
            raise NotificationNotFoundError(f"Notification {notification_id} not found")
        return notification.model_copy()

    def unread_count(self) -> int:
        return sum(1 for n in self._items.values() if not n.read)

    def add(self, notification: Notification) -> Notification:
        if notification.id in self._items:
            raise DuplicateNotificationError(
                f"Notification {notification.id} already exists"
            )
        self._items[notification.id] = notification.model_copy()
        self._enforce_retention()
        self.changed = True
        return notification

    def mark_read(self, notification_id: str) -> Notification:
        notification = self._items.get(notification_id)
        if notification is None:
            raise NotificationNotFoundError(f"Notification {notification_id} not found")
        if not notification.read:
            notification.read = True
            self.changed = True
        return notification.model_copy()

    def mark_all_read(self) -> int:
        """Mark everything read. Returns how many notifications changed."""
        updated = 0
        for notification in self._items.values():
            if not notification.read:
                notification.read = True
                updated += 1
        if updated:
            self.changed = True
        return updated

    def remove(self, notification_id: str) -> None:
        if self._items.pop(notification_id, None) is None:
            raise NotificationNotFoundError(f"Notification {notification_id} not found")
        self.changed = True

    def clear(self) -> int:
        removed = len(self._items)
        self._items.clear()
        if removed:
            self.changed = True
        return removed

    def _enforce_retention(self) -> None:
        if self.max_items is None or len(self._items) <= self.max_items:
            return
        # Oldest first; equal dates evict the earliest inserted
        oldest = sorted(self._items.values(), key=lambda n: n.date)
        excess = len(self._items) - self.max_items
        for notification in oldest[:excess]:
            del self._items[notification.id]
            logger.debug(f"Evicted notification {notification.id} (retention limit)")

    # ============================================================
    # Serialization
    # ============================================================

    def to_json(self) -> str:
        return _notification_list.dump_json(list(self._items.values())).decode("utf-8")

    @classmethod
    def from_json(cls, raw: str, max_items: Optional[int] = None) -> "NotificationStore":
        return cls(_notification_list.validate_json(raw), max_items=max_items)


class NotificationService:
    """
    Notification operations for one user, persisted in the key-value store.

    Every mutation is a single ``transact()`` on the user's document, so
    concurrent writers (several flows finishing at once) never drop each
    other's changes.
    """

    def __init__(
        self,
        store: KeyValueStore,
        storage_key: Optional[str] = None,
        max_items: Optional[int] = None,
    ):
        self.store = store
        self.storage_key = storage_key or settings.NOTIFICATIONS_STORAGE_KEY
        self.max_items = max_items if max_items is not None else settings.NOTIFICATION_MAX_ITEMS

    def _parse(self, raw: Optional[str]) -> NotificationStore:
        if raw is None:
            return NotificationStore(max_items=self.max_items)
        try:
            return NotificationStore.from_json(raw, max_items=self.max_items)
        except (ValidationError, ValueError) as e:
            # Unreadable documents are replaced on the next write
            logger.error(f"Stored notifications are corrupt, starting empty: {e}")
            return NotificationStore(max_items=self.max_items)

    async def _load(self) -> NotificationStore:
        return self._parse(await self.store.get(self.storage_key))

    async def _mutate(self, change: Callable[[NotificationStore], T]) -> T:
        outcome: List[T] = []

        def apply(raw: Optional[str]) -> Optional[str]:
            # Re-run from scratch when the backend retries the transaction
            outcome.clear()
            collection = self._parse(raw)
            outcome.append(change(collection))
            return collection.to_json() if collection.changed else None

        await self.store.transact(self.storage_key, apply)
        return outcome[0]

    # ============================================================
    # Queries
    # ============================================================

    async def list_notifications(self) -> List[Notification]:
        collection = await self._load()
        return collection.list()

    async def unread_count(self) -> int:
        collection = await self._load()
        return collection.unread_count()

    # ============================================================
    # Mutations
    # ============================================================

    async def add(self, request: NotificationCreate) -> Notification:
        new = request.to_notification()
        notification = await self._mutate(lambda c: c.add(new))
        logger.info(
            f"Notification added: {notification.id} ({notification.category.value})"
        )
        return notification

    async def mark_read(self, notification_id: str) -> Notification:
        return await self._mutate(lambda c: c.mark_read(notification_id))

    async def mark_all_read(self) -> int:
        return await self._mutate(lambda c: c.mark_all_read())

    async def remove(self, notification_id: str) -> None:
        await self._mutate(lambda c: c.remove(notification_id))

    async def clear(self) -> int:
        return await self._mutate(lambda c: c.clear())

    async def notify(
        self,
        title: str,
        description: str,
        category: NotificationCategory,
        href: Optional[str] = None,
    ) -> Notification:
        """Record an event produced by a feature flow."""
        return await self.add(
            NotificationCreate(
                title=title,
                description=description,
                category=category,
                href=href,
            )
        )
