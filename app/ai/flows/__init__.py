"""
AI Flows Module

One FlowContract per generative feature. FLOWS maps the public (URL)
name of each flow to its contract.
"""

from typing import Dict

from app.ai.flows.base import (
    FlowContract,
    FlowError,
    FlowExecutionError,
    FlowState,
    FlowValidationError,
    get_default_engine,
    set_default_engine,
)
from app.ai.flows.ocr import OCR_HANDWRITTEN_NOTES_FLOW, ocr_handwritten_notes
from app.ai.flows.practice_test import GENERATE_PRACTICE_TEST_FLOW, generate_practice_test
from app.ai.flows.flashcards import GENERATE_FLASHCARDS_FLOW, generate_flashcards
from app.ai.flows.notes import (
    GENERATE_NOTES_FLOW,
    SUMMARIZE_NOTE_FLOW,
    generate_notes,
    summarize_note,
)

FLOWS: Dict[str, FlowContract] = {
    "ocr": OCR_HANDWRITTEN_NOTES_FLOW,
    "practice-test": GENERATE_PRACTICE_TEST_FLOW,
    "flashcards": GENERATE_FLASHCARDS_FLOW,
    "notes": GENERATE_NOTES_FLOW,
    "summarize-note": SUMMARIZE_NOTE_FLOW,
}

__all__ = [
    "FLOWS",
    "FlowContract",
    "FlowError",
    "FlowExecutionError",
    "FlowState",
    "FlowValidationError",
    "get_default_engine",
    "set_default_engine",
    "ocr_handwritten_notes",
    "generate_practice_test",
    "generate_flashcards",
    "generate_notes",
    "summarize_note",
]
