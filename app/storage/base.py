"""
Key-Value Store Abstract Base Class

This module defines the interface every key-value backend must implement.
The consent flag and the per-user collections (notifications, saved
materials, test history) are persisted through it, so business logic never
depends on where the strings live (process memory in tests, Redis in
production, a browser's localStorage on the front-end).

Contract
--------
- Keys and values are plain strings.
- A key that was never written (or was deleted) reads as ``None``.
- Keys are versioned by suffix (``..._v1``); bumping the suffix is the
  migration path, old values are simply never read again.
- ``transact()`` is the only safe way to read-modify-write a value that
  other requests may be changing at the same time.
"""
import asyncio
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Callable, Dict, Optional


# Receives the current value (None if absent) and returns the value to
# write, or None to leave the key untouched. Raising aborts without writing.
Mutation = Callable[[Optional[str]], Optional[str]]


class KeyValueStoreError(Exception):
    """
    Base exception for key-value store operations.

    Backends wrap their driver errors in this so callers can catch
    storage failures generically:

        try:
            await store.set("key", "value")
        except KeyValueStoreError as e:
            ...
    """
    pass


class KeyValueStore(ABC):
    """
    Abstract base class for string key-value backends.

    Usage:
    ------
        store = MemoryKeyValueStore()
        await store.set("testprep_ai_cookie_consent_v1", "accepted")
        value = await store.get("testprep_ai_cookie_consent_v1")
    """

    def __init__(self):
        self._key_locks: Dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under ``key``.

        Returns:
            The stored string, or None when the key is absent

        Raises:
            KeyValueStoreError: If the backend cannot be reached
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """
        Write ``value`` under ``key``, replacing any previous value.

        Raises:
            KeyValueStoreError: If the backend cannot be reached
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """
        Remove ``key``.

        Returns:
            True if a value was removed, False if the key didn't exist

        Note:
            Deleting a missing key is not an error (idempotent).
        """
        pass

    async def transact(self, key: str, mutation: Mutation) -> None:
        """
        Atomically read ``key``, apply ``mutation`` and write the result.

        The default implementation serializes callers per key inside this
        process. Backends shared between processes override it.
        """
        async with self._key_locks[key]:
            new_value = mutation(await self.get(key))
            if new_value is not None:
                await self.set(key, new_value)

    async def ping(self) -> bool:
        """Health check. Backends without a remote side are always up."""
        return True


class NamespacedKeyValueStore(KeyValueStore):
    """
    View of another store with every key prefixed by ``<namespace>:``.

    Used to give each user (notifications, materials) or browser client
    (consent) its own key space on a shared backend.
    """

    def __init__(self, store: KeyValueStore, namespace: str):
        if not namespace:
            raise ValueError("namespace must be a non-empty string")
        super().__init__()
        self.store = store
        self.namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    async def get(self, key: str) -> Optional[str]:
        return await self.store.get(self._key(key))

    async def set(self, key: str, value: str) -> None:
        await self.store.set(self._key(key), value)

    async def delete(self, key: str) -> bool:
        return await self.store.delete(self._key(key))

    async def transact(self, key: str, mutation: Mutation) -> None:
        # Locking happens in the shared store, views are created per request
        await self.store.transact(self._key(key), mutation)

    async def ping(self) -> bool:
        return await self.store.ping()
