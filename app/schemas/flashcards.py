"""
Flashcard Schemas
"""

from typing import List, Optional

from pydantic import Field, StrictStr, field_validator

from app.schemas.common import CamelModel, validate_data_uri, validate_not_blank


class Flashcard(CamelModel):
    front: StrictStr = Field(
        ...,
        description=(
            "The front of the card (a question, term, or concept). Plain text, "
            "LaTeX for formulas (e.g., $E=mc^2$). Concise."
        ),
    )
    back: StrictStr = Field(
        ...,
        description=(
            "The back of the card (a short answer, definition, or brief "
            "explanation). Plain text, LaTeX for formulas. Concise."
        ),
    )


class GenerateFlashcardsInput(CamelModel):
    text_content: str = Field(
        ...,
        description="The study material (or topic prompt) to build flashcards from.",
    )
    number_of_flashcards: int = Field(
        10,
        ge=1,
        le=50,
        description="The desired number of flashcards to generate.",
    )
    file_data_uri: Optional[str] = Field(
        None,
        description="Optional source document as a data URI.",
    )

    @field_validator("text_content")
    @classmethod
    def check_text_content(cls, v: str) -> str:
        return validate_not_blank(v)

    @field_validator("file_data_uri")
    @classmethod
    def check_data_uri(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return validate_data_uri(v)


class GenerateFlashcardsOutput(CamelModel):
    title: StrictStr = Field(
        ...,
        description="A concise title for the set of flashcards.",
    )
    flashcards: List[Flashcard] = Field(
        ...,
        description="The generated flashcards, in study order.",
    )

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str) -> str:
        return validate_not_blank(v)
