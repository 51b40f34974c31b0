"""
Saved Material Endpoints

Endpoints:
----------
- GET    /materials                  - List saved materials (newest first)
- GET    /materials/{id}             - Get one material
- POST   /materials                  - Save a material (insert, or update when id is set)
- DELETE /materials/{id}             - Delete a material
- POST   /materials/{id}/flag        - Flag a material for review
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.deps import get_material_service
from app.schemas.material import (
    FlagCreate,
    FlagResponse,
    Material,
    MaterialListResponse,
    MaterialSave,
    MaterialSaveResponse,
)
from app.services.material_service import MaterialNotFoundError, MaterialService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/materials", tags=["Materials"])


@router.get(
    "",
    response_model=MaterialListResponse,
    summary="List saved materials",
)
async def list_materials(
    service: MaterialService = Depends(get_material_service),
):
    materials = await service.list_materials()
    return MaterialListResponse(materials=materials, total=len(materials))


@router.post(
    "",
    response_model=MaterialSaveResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Save a material",
    description="Inserts a new material (201) or, when `id` is given, updates it (200).",
)
async def save_material(
    request: MaterialSave,
    response: Response,
    service: MaterialService = Depends(get_material_service),
):
    try:
        material, created = await service.save_material(request)
    except MaterialNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Material not found",
        )

    if not created:
        response.status_code = status.HTTP_200_OK
    return MaterialSaveResponse(
        material=material,
        operation="inserted" if created else "updated",
    )


@router.get(
    "/{material_id}",
    response_model=Material,
    summary="Get a saved material",
)
async def get_material(
    material_id: str,
    service: MaterialService = Depends(get_material_service),
):
    try:
        return await service.get_material(material_id)
    except MaterialNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Material not found",
        )


@router.delete(
    "/{material_id}",
    summary="Delete a saved material",
)
async def delete_material(
    material_id: str,
    service: MaterialService = Depends(get_material_service),
):
    # Deleting a missing material succeeds, like any repeated delete
    await service.delete_material(material_id)
    return {"message": "Material deleted successfully."}


@router.post(
    "/{material_id}/flag",
    response_model=FlagResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Flag a material for review",
)
async def flag_material(
    material_id: str,
    response: Response,
    request: Optional[FlagCreate] = None,
    service: MaterialService = Depends(get_material_service),
):
    result = await service.flag_material(material_id, reason=request.reason if request else None)
    if result.already_flagged:
        response.status_code = status.HTTP_200_OK
    return result
