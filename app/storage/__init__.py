"""
Storage Module

Key-value storage abstraction using the Strategy Pattern.
The active backend is determined by configuration (KV_BACKEND setting).

Adding New Backends:
-------------------
1. Create new file: storage/dynamo_store.py
2. Implement DynamoKeyValueStore(KeyValueStore)
3. Add to _create_kv_store() factory function
4. Set KV_BACKEND=dynamo in config
"""

from app.storage.base import (
    KeyValueStore,
    KeyValueStoreError,
    NamespacedKeyValueStore,
)
from app.storage.memory import MemoryKeyValueStore
from app.core.config import settings

# Module-level store instance (singleton)
_kv_store_instance: KeyValueStore | None = None


def get_kv_store() -> KeyValueStore:
    """
    Factory function that returns the configured key-value backend.

    Configuration:
        Set KV_BACKEND in settings/environment:
        - "memory": Process-local dictionary
        - "redis": Redis at REDIS_URL

    Returns:
        KeyValueStore instance based on configuration
    """
    global _kv_store_instance

    if _kv_store_instance is None:
        _kv_store_instance = _create_kv_store()

    return _kv_store_instance


def _create_kv_store() -> KeyValueStore:
    backend = settings.KV_BACKEND.lower()

    if backend == "memory":
        return MemoryKeyValueStore()

    elif backend == "redis":
        # Imported lazily so the memory backend works without a Redis pool
        from app.storage.redis_store import RedisKeyValueStore
        return RedisKeyValueStore()

    else:
        raise ValueError(
            f"Unknown key-value backend: {backend}. "
            f"Valid options: memory, redis"
        )


def reset_kv_store() -> None:
    """
    Reset the key-value store singleton.

    After calling this, the next get_kv_store() call
    will create a new instance with current config.
    """
    global _kv_store_instance
    _kv_store_instance = None


__all__ = [
    "get_kv_store",
    "reset_kv_store",
    "KeyValueStore",
    "KeyValueStoreError",
    "NamespacedKeyValueStore",
    "MemoryKeyValueStore",
]
