"""
Notification Schemas

Pydantic models for in-app notifications and their API requests/responses.
"""

import random
import string
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================
# Enums
# ============================================================

class NotificationCategory(str, Enum):
    SYSTEM = "system"
    TEST_ACTIVITY = "test_activity"
    ACCOUNT = "account"
    FEATURE_UPDATE = "feature_update"
    TIP = "tip"
    ERROR = "error"


# Icon names understood by the front-end icon set
DEFAULT_ICON = "bell"

CATEGORY_ICONS: Dict[NotificationCategory, str] = {
    NotificationCategory.SYSTEM: "info",
    NotificationCategory.TEST_ACTIVITY: "file-text",
    NotificationCategory.ACCOUNT: "user-circle",
    NotificationCategory.FEATURE_UPDATE: "zap",
    NotificationCategory.TIP: "lightbulb",
    NotificationCategory.ERROR: "alert-triangle",
}


def icon_for_category(category: NotificationCategory) -> str:
    return CATEGORY_ICONS.get(category, DEFAULT_ICON)


def generate_notification_id() -> str:
    """notif-<epoch ms>-<5 base36 chars>"""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=5))
    return f"notif-{int(time.time() * 1000)}-{suffix}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================
# Entity
# ============================================================

class Notification(BaseModel):
    """One user-facing event."""
    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., min_length=1)
    title: str
    description: str
    href: Optional[str] = None
    read: bool = False
    date: datetime
    category: NotificationCategory
    icon: Optional[str] = Field(
        None,
        description="Decorative icon name; no behavioural meaning",
    )

    @field_validator("date")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        # Naive timestamps are taken as UTC so every date stays comparable
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


# ============================================================
# Request Schemas
# ============================================================

class NotificationCreate(BaseModel):
    """Request to add a notification. id and date are generated when omitted."""
    id: Optional[str] = Field(None, min_length=1)
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., max_length=2000)
    href: Optional[str] = None
    category: NotificationCategory
    icon: Optional[str] = None
    date: Optional[datetime] = None

    def to_notification(self) -> Notification:
        return Notification(
            id=self.id or generate_notification_id(),
            title=self.title,
            description=self.description,
            href=self.href,
            read=False,
            date=self.date or utc_now(),
            category=self.category,
            icon=self.icon or icon_for_category(self.category),
        )


# ============================================================
# Response Schemas
# ============================================================

class NotificationListResponse(BaseModel):
    notifications: List[Notification]
    total: int
    unread_count: int


class UnreadCountResponse(BaseModel):
    unread_count: int


class MarkAllReadResponse(BaseModel):
    updated: int
    message: str = "All notifications marked as read."
