"""
OCR Schemas

Contract for extracting text from a photo of handwritten notes.
"""

from pydantic import Field, StrictStr, field_validator

from app.schemas.common import CamelModel, validate_data_uri


class OCRHandwrittenNotesInput(CamelModel):
    photo_data_uri: str = Field(
        ...,
        description=(
            "A photo of handwritten notes, as a data URI that must include a MIME "
            "type and use Base64 encoding. Expected format: "
            "'data:<mimetype>;base64,<encoded_data>'."
        ),
    )

    @field_validator("photo_data_uri")
    @classmethod
    def check_data_uri(cls, v: str) -> str:
        return validate_data_uri(v)


class OCRHandwrittenNotesOutput(CamelModel):
    extracted_text: StrictStr = Field(
        ...,
        description="The extracted text from the handwritten notes.",
    )
