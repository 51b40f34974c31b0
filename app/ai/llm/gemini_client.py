"""
Google Gemini LLM Client (New SDK)

Integration with Google's Gemini API using the google-genai package.
Every study-material flow goes through GeminiEngine, which requests a
JSON response so the flow layer can validate it against its schema.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from google import genai
from google.genai import types

from app.ai.llm.base import AIClientNotConfiguredError, GenerationEngine
from app.ai.prompts.base import FlowPrompt
from app.core.config import settings
from app.schemas.common import DATA_URI_PATTERN, decode_data_uri_payload

logger = logging.getLogger(__name__)


# ============================================================
# INITIALIZATION STATUS
# ============================================================

@dataclass(frozen=True)
class Ready:
    model: str


@dataclass(frozen=True)
class MisconfiguredMissingCredential:
    setting: str
    message: str


AIClientStatus = Union[Ready, MisconfiguredMissingCredential]

_MISSING_KEY_BANNER = (
    "\n" + "*" * 78 + "\n"
    "FATAL: GEMINI_API_KEY (or GOOGLE_API_KEY) is not set.\n"
    "AI features (test generation, flashcards, notes, OCR) will fail\n"
    "until a key is configured and the server is restarted.\n"
    "Get a key at https://aistudio.google.com/apikey\n"
    + "*" * 78
)

_client: Optional[genai.Client] = None
_status: Optional[AIClientStatus] = None


def initialize_ai(api_key: Optional[str] = None) -> AIClientStatus:
    """
    Check credentials and create the Gemini client.

    Called once at application startup. A missing key is logged loudly
    and reported as MisconfiguredMissingCredential; generation requests
    then fail until the key is provided.
    """
    global _client, _status

    key = api_key if api_key is not None else settings.GEMINI_API_KEY
    if not key:
        _client = None
        _status = MisconfiguredMissingCredential(
            setting="GEMINI_API_KEY",
            message="GEMINI_API_KEY not set. Get your free key at https://aistudio.google.com/apikey",
        )
        logger.error(_MISSING_KEY_BANNER)
        return _status

    _client = genai.Client(api_key=key)
    _status = Ready(model=settings.GEMINI_MODEL)
    logger.info(f"Gemini client initialized (model: {settings.GEMINI_MODEL})")
    return _status


def get_ai_status() -> AIClientStatus:
    if _status is None:
        return initialize_ai()
    return _status


def reset_ai_client() -> None:
    """Forget the client and status (next call re-initializes)."""
    global _client, _status
    _client = None
    _status = None


def get_client() -> genai.Client:
    """Get the Gemini client, or fail if credentials are missing."""
    status = get_ai_status()
    if isinstance(status, MisconfiguredMissingCredential):
        raise AIClientNotConfiguredError(status.message)
    return _client


# ============================================================
# MEDIA
# ============================================================

def data_uri_to_part(data_uri: str) -> types.Part:
    """Convert 'data:<mimetype>;base64,<data>' into an inline Gemini part."""
    match = DATA_URI_PATTERN.match(data_uri)
    if not match:
        raise ValueError("Invalid data URI")
    return types.Part.from_bytes(
        data=decode_data_uri_payload(match.group("data")),
        mime_type=match.group("mime_type"),
    )


# ============================================================
# STRUCTURED GENERATION
# ============================================================

class GeminiEngine(GenerationEngine):
    """
    GenerationEngine backed by Gemini.

    Renders the flow's prompt, attaches media as inline parts and asks for
    an application/json response. The raw text is returned untouched;
    parsing and validation belong to the flow layer.
    """

    def __init__(
        self,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        self.model = model or settings.GEMINI_MODEL
        self.temperature = temperature if temperature is not None else settings.LLM_TEMPERATURE
        self.max_tokens = max_tokens or settings.LLM_MAX_TOKENS

    async def invoke(
        self,
        prompt: FlowPrompt,
        variables: Dict[str, Any],
        media: List[str],
    ) -> Optional[str]:
        client = get_client()

        contents: List[Any] = [data_uri_to_part(uri) for uri in media]
        contents.append(prompt.render(variables))

        config = types.GenerateContentConfig(
            temperature=self.temperature,
            max_output_tokens=self.max_tokens,
            response_mime_type="application/json",
        )

        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=contents,
                config=config,
            )
        except Exception as e:
            logger.error(f"Gemini API error ({prompt.name}): {e}")
            raise

        tokens_used = 0
        if getattr(response, "usage_metadata", None):
            tokens_used = getattr(response.usage_metadata, "total_token_count", 0) or 0
        logger.debug(f"{prompt.name}@{prompt.version} used {tokens_used} tokens")

        return response.text


# ============================================================
# HEALTH CHECK
# ============================================================

def check_gemini_health() -> bool:
    """Report whether the client is configured (no network call)."""
    return isinstance(get_ai_status(), Ready)
