"""
Redis Connection Module

This module provides async Redis connection management for the
key-value store (consent flags and per-user notification collections)
when KV_BACKEND=redis.
"""

import logging
from typing import Optional

from redis.asyncio import Redis, ConnectionPool

from app.core.config import settings

# ============================================================
# Logging Setup
# ============================================================
logger = logging.getLogger(__name__)

# ============================================================
# Redis Connection Pool
# ============================================================

# Global connection pool - initialized once, reused everywhere
_redis_pool: Optional[ConnectionPool] = None


def get_redis_pool() -> ConnectionPool:
    """
    Get or create the Redis connection pool.

    Uses singleton pattern - creates pool once, reuses thereafter.
    This is called during app startup when the Redis backend is active.
    """
    global _redis_pool

    if _redis_pool is None:
        _redis_pool = ConnectionPool.from_url(
            settings.REDIS_URL,
            max_connections=10,      # Max simultaneous connections
            decode_responses=True,   # Values are str, as the store contract requires
        )
        logger.info(f"Redis connection pool created: {settings.REDIS_URL}")

    return _redis_pool


async def get_redis() -> Redis:
    """Return a Redis client bound to the shared pool."""
    pool = get_redis_pool()
    return Redis(connection_pool=pool)


async def close_redis_pool():
    """
    Close Redis connection pool during app shutdown.

    Called from FastAPI lifespan events to clean up resources.
    """
    global _redis_pool

    if _redis_pool is not None:
        await _redis_pool.disconnect()
        _redis_pool = None
        logger.info("Redis connection pool closed")
