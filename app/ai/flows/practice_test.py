"""
Practice test generation.

Besides the output schema, every returned question must be of the
variant requested through ``questionType``.
"""

from typing import Any, Dict, Optional

from app.ai.flows.base import FlowContract
from app.ai.llm.base import GenerationEngine
from app.ai.prompts import GENERATE_PRACTICE_TEST_PROMPT
from app.schemas.practice_test import (
    GeneratePracticeTestInput,
    GeneratePracticeTestOutput,
    QuestionType,
    check_question_types,
)


def _prompt_variables(request: GeneratePracticeTestInput) -> Dict[str, Any]:
    if request.bloom_level is not None:
        level = request.bloom_level.value
        difficulty = (
            f"Target the Bloom's Taxonomy level: {level}. "
            f"Set the 'bloomLevel' field of every question to {level}."
        )
    else:
        difficulty = "Target a general difficulty appropriate for the provided content."

    return {
        "isMultipleChoice": request.question_type == QuestionType.MULTIPLE_CHOICE,
        "isDescriptive": request.question_type == QuestionType.DESCRIPTIVE,
        "difficultyInstruction": difficulty,
        "hasSourceDocument": request.file_data_uri is not None,
    }


GENERATE_PRACTICE_TEST_FLOW: FlowContract[GeneratePracticeTestInput, GeneratePracticeTestOutput] = FlowContract(
    name="generatePracticeTestFlow",
    input_model=GeneratePracticeTestInput,
    output_model=GeneratePracticeTestOutput,
    prompt=GENERATE_PRACTICE_TEST_PROMPT,
    prompt_variables=_prompt_variables,
    output_check=check_question_types,
)


async def generate_practice_test(
    data: Any,
    engine: Optional[GenerationEngine] = None,
) -> GeneratePracticeTestOutput:
    return await GENERATE_PRACTICE_TEST_FLOW.run(data, engine=engine)
