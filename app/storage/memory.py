"""
In-Memory Key-Value Store

Process-local backend. Used for development, single-process deployments
and tests. Values are lost on restart.
"""

import logging
from typing import Dict, Optional

from app.storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class MemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed key-value store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        super().__init__()
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def clear(self) -> None:
        """Drop every key (the equivalent of clearing browser storage)."""
        self._data.clear()
        logger.debug("In-memory key-value store cleared")
