"""Flashcard generation."""

from typing import Any, Optional

from app.ai.flows.base import FlowContract
from app.ai.llm.base import GenerationEngine
from app.ai.prompts import GENERATE_FLASHCARDS_PROMPT
from app.schemas.flashcards import GenerateFlashcardsInput, GenerateFlashcardsOutput


GENERATE_FLASHCARDS_FLOW: FlowContract[GenerateFlashcardsInput, GenerateFlashcardsOutput] = FlowContract(
    name="generateFlashcardsFlow",
    input_model=GenerateFlashcardsInput,
    output_model=GenerateFlashcardsOutput,
    prompt=GENERATE_FLASHCARDS_PROMPT,
    prompt_variables=lambda request: {"hasSourceDocument": request.file_data_uri is not None},
)


async def generate_flashcards(
    data: Any,
    engine: Optional[GenerationEngine] = None,
) -> GenerateFlashcardsOutput:
    return await GENERATE_FLASHCARDS_FLOW.run(data, engine=engine)
