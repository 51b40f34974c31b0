"""
Shared schema building blocks for the AI flow contracts.
"""

import base64
import binascii
import re
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# Expected format: 'data:<mimetype>;base64,<encoded_data>'
DATA_URI_PATTERN = re.compile(
    r"^data:(?P<mime_type>[\w.+-]+/[\w.+-]+);base64,(?P<data>[A-Za-z0-9+/=\s]+)$"
)


class CamelModel(BaseModel):
    """
    Base model for flow contracts.

    The front-end speaks camelCase (``photoDataUri``); Python code uses
    snake_case. Both are accepted on input, camelCase is emitted by
    ``model_dump(by_alias=True)``.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class BloomLevel(str, Enum):
    """Cognitive complexity level from Bloom's Taxonomy."""
    REMEMBER = "Remember"
    UNDERSTAND = "Understand"
    APPLY = "Apply"
    ANALYZE = "Analyze"
    EVALUATE = "Evaluate"
    CREATE = "Create"


def validate_data_uri(value: str) -> str:
    match = DATA_URI_PATTERN.match(value)
    if not match:
        raise ValueError(
            "must be a data URI with a MIME type and Base64 encoding: "
            "'data:<mimetype>;base64,<encoded_data>'"
        )
    try:
        decode_data_uri_payload(match.group("data"))
    except binascii.Error as e:
        raise ValueError(f"data URI payload is not valid Base64: {e}") from e
    return value


def decode_data_uri_payload(data: str) -> bytes:
    """Decode the Base64 part of a data URI, ignoring embedded whitespace."""
    return base64.b64decode("".join(data.split()), validate=True)


def validate_not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value
