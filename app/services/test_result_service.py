"""
Test Result Service

Records completed practice tests and serves the user's test history.
Each saved result also produces a test_activity notification.
"""

import logging
import uuid
from typing import List, Optional

from app.repositories.test_result_repo import TestResultRepository
from app.schemas.notification import NotificationCategory, utc_now
from app.schemas.test_result import TestResult, TestResultCreate
from app.services.notification_service import NotificationService
from app.storage.base import KeyValueStoreError

logger = logging.getLogger(__name__)

HISTORY_HREF = "/my-tests/test-history"


class TestResultService:
    """Service for a user's completed tests."""

    def __init__(
        self,
        results: TestResultRepository,
        notifications: Optional[NotificationService] = None,
    ):
        self.results = results
        self.notifications = notifications

    async def save_result(self, request: TestResultCreate) -> TestResult:
        result = await self.results.create(
            TestResult(
                id=str(uuid.uuid4()),
                completed_at=utc_now(),
                **request.model_dump(),
            )
        )
        logger.info(
            f"Test result saved: {result.id} '{result.test_title}' "
            f"{result.score}/{result.total_questions}"
        )

        if self.notifications is not None:
            try:
                await self.notifications.notify(
                    title="Test Completed",
                    description=(
                        f"You scored {result.score}/{result.total_questions} "
                        f"({result.percentage:.0f}%) on '{result.test_title}'."
                    ),
                    category=NotificationCategory.TEST_ACTIVITY,
                    href=HISTORY_HREF,
                )
            except KeyValueStoreError as e:
                logger.warning("Failed to save notification: %s", e)

        return result

    async def history(self) -> List[TestResult]:
        return await self.results.history()
