"""Chat model service for assembled multimodal payloads.

Thin wrapper over the OpenAI async client. The document pipeline produces
the full message list; this module only serializes it, calls the model,
and turns provider failures into ``UpstreamInvocationError``.

A client is created per call because the API key can differ per request.
No conversation state is kept between calls.
"""

import logging
from collections.abc import AsyncGenerator, Sequence
from typing import Any

from openai import APIError, APIStatusError, AsyncOpenAI, OpenAIError

from src.agent.config import AgentConfig, get_agent_config
from src.models.messages import Message

logger = logging.getLogger(__name__)


class UpstreamInvocationError(Exception):
    """Raised when the model call fails.

    Attributes:
        details: Diagnostic payload from the provider, if any.
    """

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message)
        self.details = details


def _error_details(error: OpenAIError) -> Any | None:
    if isinstance(error, APIStatusError):
        try:
            return error.response.json()
        except ValueError:
            return error.response.text or None
    if isinstance(error, APIError):
        return error.body
    return None


class ChatService:
    """Invokes the configured model with an assembled message list."""

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the chat service.

        Args:
            config: Optional model configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()

    @property
    def config(self) -> AgentConfig:
        return self._config

    def _create_client(self, api_key: str | None) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key=self._config.resolve_api_key(api_key),
            base_url=self._config.base_url,
        )

    def _request_kwargs(self, messages: Sequence[Message]) -> dict[str, Any]:
        return {
            "model": self._config.model_name,
            "messages": [message.to_openai() for message in messages],
            "max_tokens": self._config.max_tokens,
            "temperature": self._config.temperature,
        }

    async def get_response(
        self,
        messages: Sequence[Message],
        api_key: str | None = None,
    ) -> str:
        """Get the complete model answer.

        Args:
            messages: Assembled payload, system instruction first.
            api_key: Per-request key, overrides the configured one.

        Returns:
            The model's plain-text answer.

        Raises:
            MissingAPIKeyError: If no API key is available.
            UpstreamInvocationError: If the model call fails.
        """
        client = self._create_client(api_key)
        try:
            completion = await client.chat.completions.create(
                **self._request_kwargs(messages)
            )
        except OpenAIError as e:
            logger.error(f"OpenAI API Error: {e}")
            raise UpstreamInvocationError(
                str(e) or "Failed to process request", _error_details(e)
            ) from e
        finally:
            await client.close()

        return completion.choices[0].message.content or ""

    async def stream_response(
        self,
        messages: Sequence[Message],
        api_key: str | None = None,
    ) -> AsyncGenerator[str]:
        """Stream answer text chunks as they arrive.

        Raises:
            MissingAPIKeyError: If no API key is available.
            UpstreamInvocationError: If the model call fails, before or
                during streaming.
        """
        client = self._create_client(api_key)
        try:
            stream = await client.chat.completions.create(
                **self._request_kwargs(messages), stream=True
            )
            async for chunk in stream:
                if chunk.choices and chunk.choices[0].delta.content:
                    yield chunk.choices[0].delta.content
        except OpenAIError as e:
            logger.error(f"OpenAI streaming error: {e}")
            raise UpstreamInvocationError(
                str(e) or "Failed to process request", _error_details(e)
            ) from e
        finally:
            await client.close()


# Module-level singleton instance
_chat_service: ChatService | None = None


def get_chat_service() -> ChatService:
    """Get or create the global chat service.

    Returns:
        The ChatService instance.
    """
    global _chat_service
    if _chat_service is None:
        _chat_service = ChatService()
    return _chat_service
