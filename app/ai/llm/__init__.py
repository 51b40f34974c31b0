"""
LLM Module

Language Model integrations for study-material generation.

Currently using Google Gemini.
"""

from app.ai.llm.base import AIClientNotConfiguredError, GenerationEngine
from app.ai.llm.gemini_client import (
    AIClientStatus,
    GeminiEngine,
    MisconfiguredMissingCredential,
    Ready,
    check_gemini_health,
    get_ai_status,
    initialize_ai,
    reset_ai_client,
)

__all__ = [
    "AIClientNotConfiguredError",
    "AIClientStatus",
    "GeminiEngine",
    "GenerationEngine",
    "MisconfiguredMissingCredential",
    "Ready",
    "check_gemini_health",
    "get_ai_status",
    "initialize_ai",
    "reset_ai_client",
]
