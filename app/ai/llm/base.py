"""
Generation Engine Interface

The flow layer never talks to a model SDK directly. It hands a prompt
template, the variables to interpolate and any inline media to a
GenerationEngine and gets back the raw model output.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, TYPE_CHECKING

if TYPE_CHECKING:
    from app.ai.prompts.base import FlowPrompt


class AIClientNotConfiguredError(RuntimeError):
    """Raised when a generation request is made without credentials."""
    pass


class GenerationEngine(ABC):

    @abstractmethod
    async def invoke(
        self,
        prompt: "FlowPrompt",
        variables: Dict[str, Any],
        media: List[str],
    ) -> Any:
        """
        Run one generation request.

        Args:
            prompt: Named, versioned template to render
            variables: Values for the template placeholders
            media: Data URIs to send alongside the prompt text

        Returns:
            Raw model output: a JSON string, an already-parsed dict,
            or None when the model produced nothing
        """
        pass
