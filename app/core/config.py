from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field, field_validator


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables or .env.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"  # Ignore extra fields in .env file
    )

    # -------------------------
    # Application
    # -------------------------
    PROJECT_NAME: str = "TestPrep AI API"
    API_V1_PREFIX: str = "/api/v1"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    # -------------------------
    # Key-value store (consent flag, notifications, materials, test history)
    # -------------------------
    KV_BACKEND: str = Field(
        default="memory",
        description="Key-value backend: 'memory' or 'redis'"
    )
    REDIS_URL: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL for the key-value store"
    )

    # Keys are versioned by suffix; bumping the suffix resets every client.
    CONSENT_STORAGE_KEY: str = "testprep_ai_cookie_consent_v1"
    NOTIFICATIONS_STORAGE_KEY: str = "testprep_ai_notifications_v1"
    MATERIALS_STORAGE_KEY: str = "testprep_ai_materials_v1"
    TEST_RESULTS_STORAGE_KEY: str = "testprep_ai_test_results_v1"

    # Shared key space for content flags raised by any user
    MODERATION_NAMESPACE: str = "moderation"

    # None keeps every notification
    NOTIFICATION_MAX_ITEMS: Optional[int] = Field(
        default=None,
        ge=1,
        description="Per-user notification retention limit (oldest evicted first)"
    )

    # =========================================================
    # LLM Configuration (Google Gemini)
    # =========================================================
    # Get your API key at: https://aistudio.google.com/apikey
    # =========================================================

    GEMINI_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
        description="Google Gemini API key"
    )

    GEMINI_MODEL: str = Field(
        default="gemini-2.5-flash",
        description="Gemini model used by every generation flow"
    )

    LLM_MAX_TOKENS: int = Field(
        default=8192,
        ge=100,
        le=65536,
        description="Maximum tokens in LLM response"
    )

    # Temperature (0 = deterministic, 1 = creative)
    LLM_TEMPERATURE: float = Field(
        default=0.4,
        ge=0.0,
        le=2.0,
        description="LLM temperature for structured generation"
    )

    AI_FLOW_TIMEOUT_SECONDS: float = Field(
        default=120.0,
        gt=0,
        description="Deadline for a single generation request"
    )

    @field_validator("KV_BACKEND")
    def validate_kv_backend(cls, v):
        """Ensure key-value backend is a valid option."""
        allowed = {"memory", "redis"}
        if v.lower() not in allowed:
            raise ValueError(f"KV_BACKEND must be one of: {allowed}")
        return v.lower()


settings = Settings()
