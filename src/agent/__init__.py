"""Model invocation for assembled multimodal prompts.

Responsibilities:
    - Model configuration from environment (key, base URL, model, sampling)
    - Serialization of messages to the chat-completions wire shape
    - Complete and streaming answers
    - Mapping provider failures to UpstreamInvocationError

Holds no conversation state. Maintains clean separation from the HTTP layer.
"""

from src.agent.chat_agent import ChatService, UpstreamInvocationError, get_chat_service
from src.agent.config import AgentConfig, MissingAPIKeyError, get_agent_config

__all__ = [
    "AgentConfig",
    "ChatService",
    "MissingAPIKeyError",
    "UpstreamInvocationError",
    "get_agent_config",
    "get_chat_service",
]
