"""
Generation Endpoints

HTTP API for AI study-material generation.

Endpoints:
----------
- POST /ai/ocr             - Extract text from a photo of handwritten notes
- POST /ai/practice-test   - Generate a practice test
- POST /ai/flashcards      - Generate flashcards
- POST /ai/notes           - Generate summary notes
- POST /ai/summarize-note  - Summarize a single note

Bodies are validated by the flow contract itself so every feature
reports input errors the same way (422 with the schema errors).
Generation failures map to 502.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.encoders import jsonable_encoder

from app.ai.flows import FlowExecutionError, FlowValidationError
from app.api.deps import get_generation_service
from app.schemas.flashcards import GenerateFlashcardsOutput
from app.schemas.notes import GenerateNotesOutput, SummarizeNoteOutput
from app.schemas.ocr import OCRHandwrittenNotesOutput
from app.schemas.practice_test import GeneratePracticeTestOutput
from app.services.generation_service import GenerationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["Generation"])


async def _generate(service: GenerationService, flow_key: str, payload: Dict[str, Any]):
    try:
        return await service.generate(flow_key, payload)
    except FlowValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=jsonable_encoder({"message": e.message, "errors": e.errors}),
        )
    except FlowExecutionError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=jsonable_encoder({"message": e.message, "errors": e.errors}),
        )


@router.post(
    "/ocr",
    response_model=OCRHandwrittenNotesOutput,
    summary="Extract text from handwritten notes",
)
async def ocr_handwritten_notes(
    payload: Dict[str, Any] = Body(...),
    service: GenerationService = Depends(get_generation_service),
):
    return await _generate(service, "ocr", payload)


@router.post(
    "/practice-test",
    response_model=GeneratePracticeTestOutput,
    summary="Generate a practice test",
    description="""
    Generates multiple-choice or descriptive questions from the given
    material, optionally targeting a Bloom's Taxonomy level.
    """,
)
async def generate_practice_test(
    payload: Dict[str, Any] = Body(...),
    service: GenerationService = Depends(get_generation_service),
):
    return await _generate(service, "practice-test", payload)


@router.post(
    "/flashcards",
    response_model=GenerateFlashcardsOutput,
    summary="Generate flashcards",
)
async def generate_flashcards(
    payload: Dict[str, Any] = Body(...),
    service: GenerationService = Depends(get_generation_service),
):
    return await _generate(service, "flashcards", payload)


@router.post(
    "/notes",
    response_model=GenerateNotesOutput,
    summary="Generate summary notes",
)
async def generate_notes(
    payload: Dict[str, Any] = Body(...),
    service: GenerationService = Depends(get_generation_service),
):
    return await _generate(service, "notes", payload)


@router.post(
    "/summarize-note",
    response_model=SummarizeNoteOutput,
    summary="Summarize a note",
)
async def summarize_note(
    payload: Dict[str, Any] = Body(...),
    service: GenerationService = Depends(get_generation_service),
):
    return await _generate(service, "summarize-note", payload)
