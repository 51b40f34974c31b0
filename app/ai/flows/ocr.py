"""OCR of handwritten notes."""

from typing import Any, Optional

from app.ai.flows.base import FlowContract
from app.ai.llm.base import GenerationEngine
from app.ai.prompts import OCR_HANDWRITTEN_NOTES_PROMPT
from app.schemas.ocr import OCRHandwrittenNotesInput, OCRHandwrittenNotesOutput


OCR_HANDWRITTEN_NOTES_FLOW: FlowContract[OCRHandwrittenNotesInput, OCRHandwrittenNotesOutput] = FlowContract(
    name="ocrHandwrittenNotesFlow",
    input_model=OCRHandwrittenNotesInput,
    output_model=OCRHandwrittenNotesOutput,
    prompt=OCR_HANDWRITTEN_NOTES_PROMPT,
)


async def ocr_handwritten_notes(
    data: Any,
    engine: Optional[GenerationEngine] = None,
) -> OCRHandwrittenNotesOutput:
    return await OCR_HANDWRITTEN_NOTES_FLOW.run(data, engine=engine)
