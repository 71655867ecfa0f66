"""Pydantic models for conversation content and API payloads.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Message: One conversational turn, plain text or content blocks
    - TextBlock / ImageBlock: Typed units of structured message content
    - ChatRequest: Incoming chat request payload
    - ChatResponse / ErrorResponse: Outgoing chat result
    - StreamChunk: One Server-Sent Event of a streamed answer
    - PDFUploadResponse: Upload result with rendered page images
"""

from src.models.messages import (
    ContentBlock,
    ImageBlock,
    Message,
    TextBlock,
    as_blocks,
    is_inline_image,
)
from src.models.schemas import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    PDFUploadResponse,
    StreamChunk,
    StreamStatus,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ContentBlock",
    "ErrorResponse",
    "ImageBlock",
    "Message",
    "PDFUploadResponse",
    "StreamChunk",
    "StreamStatus",
    "TextBlock",
    "as_blocks",
    "is_inline_image",
]
