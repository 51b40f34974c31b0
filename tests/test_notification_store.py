import itertools
from datetime import datetime, timedelta, timezone

import pytest

from app.schemas.notification import Notification, NotificationCategory
from app.services.notification_service import (
    DuplicateNotificationError,
    NotificationNotFoundError,
    NotificationStore,
)

BASE = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make(id, hours_ago=0, read=False, category=NotificationCategory.SYSTEM):
    return Notification(
        id=id,
        title=f"Title {id}",
        description="Something happened",
        read=read,
        date=BASE - timedelta(hours=hours_ago),
        category=category,
    )


def test_list_sorted_newest_first_for_any_insertion_order():
    items = [make("a", 3), make("b", 1), make("c", 2), make("d", 0)]
    for perm in itertools.permutations(items):
        store = NotificationStore(list(perm))
        assert [n.id for n in store.list()] == ["d", "b", "c", "a"]


def test_equal_dates_keep_insertion_order():
    store = NotificationStore([make("x", 1), make("y", 1), make("z", 1)])
    assert [n.id for n in store.list()] == ["x", "y", "z"]
    # repeated reads are identical
    assert store.list() == store.list()


def test_mark_read_decrements_unread_count_once():
    store = NotificationStore([make("a"), make("b", 1), make("c", 2, read=True)])
    assert store.unread_count() == 2

    updated = store.mark_read("a")
    assert updated.read is True
    assert store.unread_count() == 1

    store.mark_read("a")
    assert store.unread_count() == 1

    store.mark_read("c")
    assert store.unread_count() == 1


def test_mark_read_unknown_id_leaves_collection_unchanged():
    store = NotificationStore([make("a"), make("b", 1)])
    before = store.list()

    with pytest.raises(NotificationNotFoundError):
        store.mark_read("nonexistent-id")

    assert store.list() == before


def test_mark_all_read_is_idempotent():
    store = NotificationStore([make("a"), make("b", 1, read=True), make("c", 2)])
    assert store.mark_all_read() == 2
    assert store.unread_count() == 0
    assert store.mark_all_read() == 0
    assert store.unread_count() == 0


def test_add_rejects_duplicate_id():
    store = NotificationStore([make("a")])
    with pytest.raises(DuplicateNotificationError):
        store.add(make("a", 5))
    assert len(store) == 1


def test_remove_and_clear():
    store = NotificationStore([make("a"), make("b", 1)])
    store.remove("a")
    assert "a" not in store
    with pytest.raises(NotificationNotFoundError):
        store.remove("a")
    assert store.clear() == 1
    assert store.list() == []


def test_list_returns_copies():
    store = NotificationStore([make("a")])
    store.list()[0].read = True
    assert store.unread_count() == 1


def test_retention_evicts_oldest():
    store = NotificationStore(max_items=2)
    store.add(make("old", 10))
    store.add(make("mid", 5))
    store.add(make("new", 0))
    assert [n.id for n in store.list()] == ["new", "mid"]


def test_retention_ties_evict_earliest_inserted():
    store = NotificationStore(max_items=2)
    store.add(make("first", 1))
    store.add(make("second", 1))
    store.add(make("third", 1))
    assert [n.id for n in store.list()] == ["second", "third"]


def test_changed_only_after_effective_mutation():
    store = NotificationStore([make("a", read=True)])
    assert store.changed is False

    store.mark_read("a")
    assert store.mark_all_read() == 0
    assert store.changed is False

    store.add(make("b"))
    assert store.changed is True


def test_invalid_category_rejected():
    with pytest.raises(ValueError):
        Notification(
            id="bad",
            title="t",
            description="d",
            date=BASE,
            category="marketing",
        )


def test_naive_dates_are_treated_as_utc():
    n = Notification(
        id="n",
        title="t",
        description="d",
        date=datetime(2024, 5, 1, 12, 0),
        category=NotificationCategory.TIP,
    )
    assert n.date.tzinfo == timezone.utc


def test_json_round_trip_preserves_order_and_state():
    store = NotificationStore([make("a", 1), make("b", 1, read=True)])
    restored = NotificationStore.from_json(store.to_json())
    assert restored.list() == store.list()
    assert restored.unread_count() == 1
