"""
Saved Material Schemas

Generated study materials (tests, notes, flashcard sets) kept in a user's
library, and content flags raised against them for moderation.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from app.schemas.common import CamelModel, validate_not_blank


class MaterialType(str, Enum):
    TEST = "test"
    NOTES = "notes"
    FLASHCARDS = "flashcards"
    TEST_RESULT = "test_result"


class FlagStatus(str, Enum):
    PENDING_REVIEW = "pending_review"
    DISMISSED = "dismissed"
    ACTIONED = "actioned"


class SourceFileInfo(CamelModel):
    name: str
    type: str
    size: int = Field(..., ge=0)


# ============================================================
# Materials
# ============================================================

class _MaterialFields(CamelModel):
    title: str = Field(..., max_length=255)
    type: MaterialType
    content: Optional[Any] = Field(
        None,
        description="Generated output; empty while processing is still running",
    )
    source_file_info: Optional[SourceFileInfo] = None
    source_text_prompt: Optional[str] = None
    generation_params: Optional[Dict[str, Any]] = None
    is_public: bool = False
    tags: List[str] = Field(default_factory=list)
    storage_path: Optional[str] = None
    status: str = Field(
        ...,
        max_length=64,
        description="Processing status, e.g. PENDING_EXTRACTION, COMPLETED, AI_PROCESSING_FAILED",
    )

    @field_validator("title", "status")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        return validate_not_blank(v)


class MaterialSave(_MaterialFields):
    """Insert (no id) or full update (id of an existing material)."""
    id: Optional[str] = Field(None, min_length=1)


class Material(_MaterialFields):
    id: str
    created_at: datetime
    updated_at: datetime


class MaterialSaveResponse(CamelModel):
    material: Material
    operation: str = Field(..., description="'inserted' or 'updated'")


class MaterialListResponse(CamelModel):
    materials: List[Material]
    total: int


# ============================================================
# Flags
# ============================================================

class FlagCreate(CamelModel):
    reason: Optional[str] = Field(None, max_length=1000)


class MaterialFlag(CamelModel):
    id: str
    material_id: str
    flagged_by_user_id: str
    reason: Optional[str] = None
    status: FlagStatus = FlagStatus.PENDING_REVIEW
    created_at: datetime


class FlagResponse(CamelModel):
    flag: MaterialFlag
    already_flagged: bool = False
    message: str
