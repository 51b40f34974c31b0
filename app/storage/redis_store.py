"""
Redis Key-Value Store

Shared backend for multi-process deployments. Uses the connection pool
managed in app.db.redis so the whole app reuses one pool.
"""

import logging
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError, WatchError

from app.db.redis import get_redis
from app.storage.base import KeyValueStore, KeyValueStoreError, Mutation

logger = logging.getLogger(__name__)

# Optimistic transaction attempts before giving up on a contended key
MAX_TRANSACTION_ATTEMPTS = 10


class RedisKeyValueStore(KeyValueStore):
    """
    Key-value store on top of redis.asyncio.

    Args:
        client: Optional Redis client. When omitted, a client bound to the
                shared connection pool is created on first use.
    """

    def __init__(self, client: Optional[Redis] = None):
        super().__init__()
        self._client = client

    async def _get_client(self) -> Redis:
        if self._client is None:
            self._client = await get_redis()
        return self._client

    async def get(self, key: str) -> Optional[str]:
        client = await self._get_client()
        try:
            return await client.get(key)
        except RedisError as e:
            logger.error(f"Redis GET failed for key {key}: {e}")
            raise KeyValueStoreError(f"Failed to read key {key}") from e

    async def set(self, key: str, value: str) -> None:
        client = await self._get_client()
        try:
            await client.set(key, value)
        except RedisError as e:
            logger.error(f"Redis SET failed for key {key}: {e}")
            raise KeyValueStoreError(f"Failed to write key {key}") from e

    async def delete(self, key: str) -> bool:
        client = await self._get_client()
        try:
            removed = await client.delete(key)
        except RedisError as e:
            logger.error(f"Redis DEL failed for key {key}: {e}")
            raise KeyValueStoreError(f"Failed to delete key {key}") from e
        return bool(removed)

    async def transact(self, key: str, mutation: Mutation) -> None:
        """WATCH/MULTI/EXEC, retried when another writer touched the key."""
        client = await self._get_client()
        try:
            async with client.pipeline(transaction=True) as pipe:
                for attempt in range(1, MAX_TRANSACTION_ATTEMPTS + 1):
                    try:
                        await pipe.watch(key)
                        new_value = mutation(await pipe.get(key))
                        if new_value is None:
                            return
                        pipe.multi()
                        pipe.set(key, new_value)
                        await pipe.execute()
                        return
                    except WatchError:
                        logger.debug(f"Key {key} changed during transaction (attempt {attempt})")
                        continue
        except RedisError as e:
            logger.error(f"Redis transaction failed for key {key}: {e}")
            raise KeyValueStoreError(f"Failed to update key {key}") from e

        raise KeyValueStoreError(
            f"Key {key} kept changing, gave up after {MAX_TRANSACTION_ATTEMPTS} attempts"
        )

    async def ping(self) -> bool:
        try:
            client = await self._get_client()
            return bool(await client.ping())
        except RedisError as e:
            logger.error(f"Redis health check failed: {e}")
            return False
