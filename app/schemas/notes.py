"""
Note Schemas

Contracts for generated summary notes and for summarizing a user's own note.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, StrictStr, field_validator

from app.schemas.common import CamelModel, validate_data_uri, validate_not_blank


class NoteLength(str, Enum):
    SHORT = "short"     # ~3 min read
    MEDIUM = "medium"   # ~7 min read
    LONG = "long"       # ~10-12 min read


class GenerateNotesInput(CamelModel):
    text_content: str = Field(
        ...,
        description="The study material (or topic prompt) to summarize.",
    )
    note_length: NoteLength = Field(
        NoteLength.MEDIUM,
        description="The desired length and detail of the notes.",
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


class GenerateNotesOutput(CamelModel):
    title: StrictStr = Field(
        ...,
        description="A concise title for the notes (the H1 of notesContent, without '#').",
    )
    notes_content: StrictStr = Field(
        ...,
        description=(
            "The summary as a single markdown string. Must begin with the title "
            "as a Markdown H1 heading. Formulas use LaTeX in '$...$' or '$$...$$'."
        ),
    )

    @field_validator("title", "notes_content")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        return validate_not_blank(v)


class SummarizeNoteInput(CamelModel):
    note_content: str = Field(
        ...,
        description="The content of the note to be summarized.",
    )

    @field_validator("note_content")
    @classmethod
    def check_note_content(cls, v: str) -> str:
        return validate_not_blank(v)


class SummarizeNoteOutput(CamelModel):
    summary: StrictStr = Field(
        ...,
        description="The summarized content of the note.",
    )
