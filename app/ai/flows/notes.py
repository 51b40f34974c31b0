"""Summary-note generation and single-note summarization."""

from typing import Any, Optional

from app.ai.flows.base import FlowContract
from app.ai.llm.base import GenerationEngine
from app.ai.prompts import GENERATE_NOTES_PROMPT, SUMMARIZE_NOTE_PROMPT
from app.schemas.notes import (
    GenerateNotesInput,
    GenerateNotesOutput,
    SummarizeNoteInput,
    SummarizeNoteOutput,
)


GENERATE_NOTES_FLOW: FlowContract[GenerateNotesInput, GenerateNotesOutput] = FlowContract(
    name="generateNotesFlow",
    input_model=GenerateNotesInput,
    output_model=GenerateNotesOutput,
    prompt=GENERATE_NOTES_PROMPT,
    prompt_variables=lambda request: {"hasSourceDocument": request.file_data_uri is not None},
)

SUMMARIZE_NOTE_FLOW: FlowContract[SummarizeNoteInput, SummarizeNoteOutput] = FlowContract(
    name="summarizeNoteFlow",
    input_model=SummarizeNoteInput,
    output_model=SummarizeNoteOutput,
    prompt=SUMMARIZE_NOTE_PROMPT,
)


async def generate_notes(
    data: Any,
    engine: Optional[GenerationEngine] = None,
) -> GenerateNotesOutput:
    return await GENERATE_NOTES_FLOW.run(data, engine=engine)


async def summarize_note(
    data: Any,
    engine: Optional[GenerationEngine] = None,
) -> SummarizeNoteOutput:
    return await SUMMARIZE_NOTE_FLOW.run(data, engine=engine)
