"""
Test Result Schemas

A completed practice-test attempt as recorded in the user's test history.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field, field_validator, model_validator

from app.schemas.common import CamelModel, validate_not_blank


class TestResultCreate(CamelModel):
    test_title: str = Field(..., max_length=255)
    original_test_id: Optional[str] = Field(
        None,
        description="Saved material the test was taken from, if any",
    )
    original_test_type: str = Field("unknown", description="e.g. 'multipleChoice'")
    score: int = Field(..., ge=0)
    total_questions: int = Field(..., ge=0)
    percentage: float = Field(..., ge=0, le=100)
    answers: Any = Field(..., description="Per-question answers as submitted")
    time_taken_seconds: Optional[int] = Field(None, ge=0)

    @field_validator("test_title")
    @classmethod
    def check_title(cls, v: str) -> str:
        return validate_not_blank(v)

    @model_validator(mode="after")
    def check_score(self):
        if self.score > self.total_questions:
            raise ValueError(
                f"score {self.score} exceeds totalQuestions {self.total_questions}"
            )
        return self


class TestResult(TestResultCreate):
    id: str
    completed_at: datetime


class TestHistoryResponse(CamelModel):
    history: List[TestResult]
    total: int
