"""Model configuration with environment variable loading.

Pydantic-based configuration for the multimodal chat model.
Supports OpenAI and OpenAI-compatible APIs via custom base URL.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class MissingAPIKeyError(ValueError):
    """Raised when neither the request nor the environment provides a key."""


class AgentConfig(BaseModel):
    """Configuration for the chat model.

    The API key may be empty here; requests can bring their own key,
    which ``resolve_api_key`` prefers over the configured one.

    Attributes:
        api_key: Default API key for model access.
        base_url: API base URL (None for OpenAI default).
        model_name: Vision-capable model identifier.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in generated response.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("LLM_API_KEY", os.getenv("OPENAI_API_KEY", "")),
        description="API key for LLM provider",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (None for OpenAI default)",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gpt-4o"),
        description="Model to use",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int = Field(
        default=1500,
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace from the API key."""
        return v.strip()

    def resolve_api_key(self, override: str | None = None) -> str:
        """Pick the request key if given, else the configured key.

        Raises:
            MissingAPIKeyError: If both are empty.
        """
        key = (override or "").strip() or self.api_key
        if not key:
            raise MissingAPIKeyError(
                "API key is required. Send api_key or set LLM_API_KEY / OPENAI_API_KEY"
            )
        return key


def get_agent_config() -> AgentConfig:
    """Create model configuration from environment.

    Returns:
        Configured AgentConfig instance.
    """
    return AgentConfig()
