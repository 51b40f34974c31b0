"""AI Prompts Module"""

from app.ai.prompts.base import FlowPrompt
from app.ai.prompts.ocr_prompts import OCR_HANDWRITTEN_NOTES_PROMPT
from app.ai.prompts.practice_test_prompts import GENERATE_PRACTICE_TEST_PROMPT
from app.ai.prompts.flashcard_prompts import GENERATE_FLASHCARDS_PROMPT
from app.ai.prompts.note_prompts import GENERATE_NOTES_PROMPT, SUMMARIZE_NOTE_PROMPT

__all__ = [
    "FlowPrompt",
    "OCR_HANDWRITTEN_NOTES_PROMPT",
    "GENERATE_PRACTICE_TEST_PROMPT",
    "GENERATE_FLASHCARDS_PROMPT",
    "GENERATE_NOTES_PROMPT",
    "SUMMARIZE_NOTE_PROMPT",
]
