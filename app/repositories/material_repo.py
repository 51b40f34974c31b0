"""
Material Repository

Saved materials live in the owner's key space. Flags live in a shared
moderation key space, one document per flagged material keyed by the
flagging user, so a user can flag a material at most once.
"""

from typing import List, Optional

from app.core.config import settings
from app.repositories.base import BaseRepository
from app.schemas.material import Material, MaterialFlag
from app.storage.base import KeyValueStore


class MaterialRepository(BaseRepository[Material]):

    def __init__(self, store: KeyValueStore, key: Optional[str] = None):
        super().__init__(Material, store, key or settings.MATERIALS_STORAGE_KEY)

    async def list_newest_first(self) -> List[Material]:
        return await self.get_all(order_by=lambda m: m.created_at, descending=True)


class FlagRepository(BaseRepository[MaterialFlag]):

    def __init__(self, store: KeyValueStore, material_id: str):
        super().__init__(
            MaterialFlag,
            store,
            f"material_flags:{material_id}",
            id_field="flagged_by_user_id",
        )
