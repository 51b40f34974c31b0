"""
Generation Service

Runs a study-material flow on behalf of a user and records the outcome
in the user's notifications:
- success -> test_activity notification linking to saved materials
- generation failure -> error notification
Invalid input is the caller's mistake and produces no notification.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel

from app.ai.flows import FLOWS, FlowContract, FlowExecutionError
from app.ai.llm.base import GenerationEngine
from app.schemas.notification import NotificationCategory
from app.services.notification_service import NotificationService
from app.storage.base import KeyValueStoreError

logger = logging.getLogger(__name__)

MATERIALS_HREF = "/my-tests"
GENERATOR_HREF = "/ai-content-generator"


class UnknownFlowError(Exception):
    pass


def _success_message(flow_key: str, output: BaseModel) -> tuple[str, str]:
    if flow_key == "practice-test":
        return (
            "Practice Test Generated",
            f"'{output.test_title}' with {len(output.questions)} questions is ready.",
        )
    if flow_key == "flashcards":
        return (
            "Flashcards Generated",
            f"'{output.title}' with {len(output.flashcards)} cards is ready.",
        )
    if flow_key == "notes":
        return "Notes Generated", f"'{output.title}' is ready to read."
    if flow_key == "ocr":
        return "Notes Scanned", "Text was extracted from your handwritten notes."
    return "Summary Ready", "Your note summary is ready."


class GenerationService:
    """Service wrapping flow execution with notification side effects."""

    def __init__(
        self,
        notifications: NotificationService,
        engine: Optional[GenerationEngine] = None,
    ):
        self.notifications = notifications
        self.engine = engine

    def get_flow(self, flow_key: str) -> FlowContract:
        flow = FLOWS.get(flow_key)
        if flow is None:
            raise UnknownFlowError(f"Unknown flow: {flow_key}")
        return flow

    async def generate(self, flow_key: str, data: Any) -> BaseModel:
        flow = self.get_flow(flow_key)

        try:
            output = await flow.run(data, engine=self.engine)
        except FlowExecutionError as e:
            logger.error(f"Generation failed for {flow_key}: {e}")
            await self._record(
                title="Generation Failed",
                description=f"We couldn't generate your {flow_key.replace('-', ' ')}. Please try again.",
                category=NotificationCategory.ERROR,
                href=GENERATOR_HREF,
            )
            raise

        title, description = _success_message(flow_key, output)
        await self._record(
            title=title,
            description=description,
            category=NotificationCategory.TEST_ACTIVITY,
            href=MATERIALS_HREF,
        )
        return output

    async def _record(self, **notification) -> None:
        # A lost notification must not fail the generation itself
        try:
            await self.notifications.notify(**notification)
        except KeyValueStoreError as e:
            logger.warning("Failed to save notification: %s", e)
