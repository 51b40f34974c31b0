"""
Material Service

A user's library of saved study materials:
- Insert or update a material (generated content plus its processing status)
- List newest first, fetch, delete
- Flag a material for moderation review (once per user and material)
"""

import logging
import uuid
from typing import List, Optional, Tuple

from app.repositories.base import RecordExistsError
from app.repositories.material_repo import FlagRepository, MaterialRepository
from app.schemas.material import (
    FlagResponse,
    Material,
    MaterialFlag,
    MaterialSave,
)
from app.schemas.notification import utc_now
from app.storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class MaterialServiceError(Exception):
    pass


class MaterialNotFoundError(MaterialServiceError):
    pass


class MaterialService:
    """
    Saved materials of one user.

    Args:
        materials: The user's material repository
        moderation_store: Shared store that holds flags from every user
        user_id: The acting user, recorded on flags
    """

    def __init__(
        self,
        materials: MaterialRepository,
        moderation_store: KeyValueStore,
        user_id: str,
    ):
        self.materials = materials
        self.moderation_store = moderation_store
        self.user_id = user_id

    async def list_materials(self) -> List[Material]:
        return await self.materials.list_newest_first()

    async def get_material(self, material_id: str) -> Material:
        material = await self.materials.get_by_id(material_id)
        if material is None:
            raise MaterialNotFoundError(f"Material {material_id} not found")
        return material

    async def save_material(self, request: MaterialSave) -> Tuple[Material, bool]:
        """
        Insert a new material, or replace the fields of an existing one.

        Returns:
            (material, created) where created is False for an update

        Raises:
            MaterialNotFoundError: request.id names no material of this user
        """
        fields = request.model_dump(exclude={"id"})
        now = utc_now()

        if request.id:
            updated = await self.materials.update(request.id, **fields, updated_at=now)
            if updated is None:
                raise MaterialNotFoundError(f"Material {request.id} not found")
            logger.info(f"Material updated: {updated.id} ({updated.status})")
            return updated, False

        material = await self.materials.create(
            Material(
                id=str(uuid.uuid4()),
                created_at=now,
                updated_at=now,
                **fields,
            )
        )
        logger.info(f"Material saved: {material.id} '{material.title}' ({material.type.value})")
        return material, True

    async def delete_material(self, material_id: str) -> bool:
        """Idempotent; returns whether anything was removed."""
        removed = await self.materials.delete(material_id)
        if removed:
            logger.info(f"Material deleted: {material_id}")
        return removed

    async def flag_material(self, material_id: str, reason: Optional[str] = None) -> FlagResponse:
        flags = FlagRepository(self.moderation_store, material_id)
        flag = MaterialFlag(
            id=str(uuid.uuid4()),
            material_id=material_id,
            flagged_by_user_id=self.user_id,
            reason=reason,
            created_at=utc_now(),
        )

        try:
            flag = await flags.create(flag)
        except RecordExistsError:
            existing = await flags.get_by_id(self.user_id)
            logger.info(f"User {self.user_id} already flagged material {material_id}")
            return FlagResponse(
                flag=existing,
                already_flagged=True,
                message="You have already flagged this material.",
            )

        logger.warning(f"Material {material_id} flagged by {self.user_id}: {reason or 'no reason'}")
        return FlagResponse(flag=flag, message="Material flagged successfully for review.")
