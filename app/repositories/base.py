"""
Base Repository

Generic repository over the key-value store.
All records of one collection live in a single JSON document (an object
keyed by record id), and every write is one ``transact()`` on that
document, so concurrent requests never lose each other's records.
"""

import logging
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from app.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)
T = TypeVar("T")


class RecordExistsError(Exception):
    pass


class BaseRepository(Generic[ModelType]):
    """
    Base repository class with common CRUD operations.

    Args:
        model: Pydantic model of one record
        store: Key-value store (usually namespaced per user)
        key: Storage key of the collection document
        id_field: Record attribute used as the document key
    """

    def __init__(
        self,
        model: Type[ModelType],
        store: KeyValueStore,
        key: str,
        id_field: str = "id",
    ):
        self.model = model
        self.store = store
        self.key = key
        self.id_field = id_field
        self._adapter = TypeAdapter(Dict[str, model])

    def _decode(self, raw: Optional[str]) -> Dict[str, ModelType]:
        if raw is None:
            return {}
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            # Unreadable documents are replaced on the next write
            logger.error(f"Stored {self.key} is corrupt, starting empty: {e}")
            return {}

    def _encode(self, records: Dict[str, ModelType]) -> str:
        return self._adapter.dump_json(records).decode("utf-8")

    async def _load(self) -> Dict[str, ModelType]:
        return self._decode(await self.store.get(self.key))

    async def _mutate(
        self,
        change: Callable[[Dict[str, ModelType]], T],
        persist: Callable[[T], bool] = lambda _: True,
    ) -> T:
        """Apply ``change`` to the document; write it back if ``persist`` agrees."""
        outcome: List[T] = []

        def apply(raw: Optional[str]) -> Optional[str]:
            outcome.clear()
            records = self._decode(raw)
            result = change(records)
            outcome.append(result)
            return self._encode(records) if persist(result) else None

        await self.store.transact(self.key, apply)
        return outcome[0]

    # -----------------------------
    # Get Element By id
    # -----------------------------
    async def get_by_id(self, id: str) -> Optional[ModelType]:
        return (await self._load()).get(id)

    # -----------------------------
    # Get all Records
    # -----------------------------
    async def get_all(
        self,
        order_by: Optional[Callable[[ModelType], Any]] = None,
        descending: bool = False,
    ) -> List[ModelType]:
        """All records; unordered calls return insertion order."""
        records = list((await self._load()).values())
        if order_by is not None:
            # Stable in both directions, ties keep insertion order
            records.sort(key=order_by, reverse=descending)
        return records

    # -----------------------------
    # Create Single Record
    # -----------------------------
    async def create(self, instance: ModelType) -> ModelType:
        record_id = getattr(instance, self.id_field)

        def insert(records: Dict[str, ModelType]) -> ModelType:
            if record_id in records:
                raise RecordExistsError(f"{self.model.__name__} {record_id} already exists")
            records[record_id] = instance
            return instance

        return await self._mutate(insert)

    # -----------------------------
    # Update record
    # -----------------------------
    async def update(self, id: str, **changes: Any) -> Optional[ModelType]:
        """Re-validates the merged record. Returns None for an unknown id."""

        def apply_changes(records: Dict[str, ModelType]) -> Optional[ModelType]:
            current = records.get(id)
            if current is None:
                return None
            updated = self.model.model_validate({**current.model_dump(), **changes})
            records[id] = updated
            return updated

        return await self._mutate(apply_changes, persist=lambda result: result is not None)

    async def delete(self, id: str) -> bool:
        return await self._mutate(
            lambda records: records.pop(id, None) is not None,
            persist=bool,
        )

    async def count(self) -> int:
        return len(await self._load())
