"""
Consent Schemas
"""

from enum import Enum

from pydantic import BaseModel


class ConsentState(str, Enum):
    UNSET = "unset"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class ConsentResponse(BaseModel):
    state: ConsentState
    banner_visible: bool
