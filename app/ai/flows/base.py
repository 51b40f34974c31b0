"""
Flow Contract Executor

Every generative feature has the same shape:

    Pending -> Validating -> ValidationFailed
                         -> Executing -> ExecutionFailed
                                      -> Validated (returns output)

FlowContract holds one feature's input schema, output schema and prompt
template, and run() drives that state machine:

1. Validate the input. Failure raises FlowValidationError and no
   generation request is made.
2. Make exactly one request to the GenerationEngine, bounded by
   AI_FLOW_TIMEOUT_SECONDS. No retries.
3. Parse and validate the raw output. Anything short of a fully valid
   output raises FlowExecutionError; nothing is patched or defaulted.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.ai.llm.base import GenerationEngine
from app.ai.prompts.base import FlowPrompt
from app.core.config import settings

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


class FlowState(str, Enum):
    PENDING = "pending"
    VALIDATING = "validating"
    VALIDATION_FAILED = "validation_failed"
    EXECUTING = "executing"
    EXECUTION_FAILED = "execution_failed"
    VALIDATED = "validated"


# ============================================================
# Errors
# ============================================================

class FlowError(Exception):

    def __init__(self, flow: str, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(f"{flow}: {message}")
        self.flow = flow
        self.message = message
        self.errors = errors or []


class FlowValidationError(FlowError):
    """Input does not satisfy the flow's input schema."""
    state = FlowState.VALIDATION_FAILED


class FlowExecutionError(FlowError):
    """The generator failed or returned output that breaks the output schema."""
    state = FlowState.EXECUTION_FAILED


# ============================================================
# Raw output parsing
# ============================================================

def strip_code_fences(content: str) -> str:
    content = content.strip()
    if content.startswith("```"):
        lines = content.split("\n")
        lines = lines[1:]  # remove opening fence
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        content = "\n".join(lines)
    return content


def looks_like_json_schema(data: Any) -> bool:
    """True when the model echoed a schema definition instead of data."""
    return (
        isinstance(data, dict)
        and data.get("type") == "object"
        and isinstance(data.get("properties"), dict)
    )


# ============================================================
# Contract
# ============================================================

_default_engine: Optional[GenerationEngine] = None


def get_default_engine() -> GenerationEngine:
    global _default_engine
    if _default_engine is None:
        from app.ai.llm.gemini_client import GeminiEngine
        _default_engine = GeminiEngine()
    return _default_engine


def set_default_engine(engine: Optional[GenerationEngine]) -> None:
    """Replace the engine used when run() gets none (None restores Gemini)."""
    global _default_engine
    _default_engine = engine


@dataclass(frozen=True)
class FlowContract(Generic[InputT, OutputT]):
    name: str
    input_model: Type[InputT]
    output_model: Type[OutputT]
    prompt: FlowPrompt
    # Extra template variables derived from the validated input
    prompt_variables: Optional[Callable[[InputT], Dict[str, Any]]] = None
    # Cross-field rule between input and output; raises ValueError
    output_check: Optional[Callable[[InputT, OutputT], None]] = None

    def output_schema_json(self) -> str:
        return json.dumps(self.output_model.model_json_schema(by_alias=True), indent=2)

    def validate_input(self, raw_input: Any) -> InputT:
        try:
            return self.input_model.model_validate(raw_input)
        except ValidationError as e:
            raise FlowValidationError(
                self.name,
                "Input failed validation",
                errors=e.errors(include_url=False, include_context=False),
            ) from e

    def build_variables(self, request: InputT) -> Dict[str, Any]:
        variables = request.model_dump(by_alias=True, mode="json")
        if self.prompt_variables is not None:
            variables.update(self.prompt_variables(request))
        variables["outputSchema"] = self.output_schema_json()
        return variables

    def parse_output(self, raw_output: Any, request: InputT) -> OutputT:
        if raw_output is None or (isinstance(raw_output, str) and not raw_output.strip()):
            raise FlowExecutionError(self.name, "AI returned an empty response")

        if isinstance(raw_output, BaseModel):
            data = raw_output.model_dump(by_alias=True)
        elif isinstance(raw_output, str):
            try:
                data = json.loads(strip_code_fences(raw_output))
            except json.JSONDecodeError as e:
                logger.error(f"Failed to parse {self.name} JSON: {e}\nRaw: {raw_output[:500]}")
                raise FlowExecutionError(self.name, "AI returned malformed JSON") from e
        else:
            data = raw_output

        if looks_like_json_schema(data):
            logger.error(f"{self.name}: AI returned a schema definition instead of data")
            raise FlowExecutionError(self.name, "AI returned an unexpected format")

        try:
            output = self.output_model.model_validate(data)
        except ValidationError as e:
            raise FlowExecutionError(
                self.name,
                "AI output failed validation",
                errors=e.errors(include_url=False, include_context=False),
            ) from e

        if self.output_check is not None:
            try:
                self.output_check(request, output)
            except ValueError as e:
                raise FlowExecutionError(self.name, str(e)) from e

        return output

    async def run(self, raw_input: Any, engine: Optional[GenerationEngine] = None) -> OutputT:
        logger.debug(f"{self.name}: {FlowState.VALIDATING.value}")
        request = self.validate_input(raw_input)

        engine = engine or get_default_engine()
        variables = self.build_variables(request)
        media = [
            variables[name]
            for name in self.prompt.media_variables
            if variables.get(name)
        ]

        logger.info(f"{self.name}: {FlowState.EXECUTING.value} ({self.prompt.key})")
        try:
            raw_output = await asyncio.wait_for(
                engine.invoke(self.prompt, variables, media),
                timeout=settings.AI_FLOW_TIMEOUT_SECONDS,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"{self.name}: generation timed out")
            raise FlowExecutionError(self.name, "AI generation timed out") from e
        except Exception as e:
            logger.error(f"{self.name}: generation failed: {e}")
            raise FlowExecutionError(self.name, f"AI generation failed: {e}") from e

        output = self.parse_output(raw_output, request)
        logger.debug(f"{self.name}: {FlowState.VALIDATED.value}")
        return output
