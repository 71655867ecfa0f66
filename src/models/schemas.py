from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from src.models.messages import ImageBlock, Message, is_inline_image


class StreamStatus(str, Enum):
    """Status values for streaming updates."""

    RECEIVED = "received"
    EXTRACTING = "extracting"
    GENERATING = "generating"
    COMPLETE = "complete"
    ERROR = "error"


class ChatRequest(BaseModel):
    """Request payload for the chat endpoints.

    Field names also accept the camelCase spelling used by browser clients
    (``apiKey``, ``pdfBase64``, ``pdfImages``).

    Attributes:
        api_key: Optional per-request model API key. Falls back to the
            environment when omitted.
        messages: Conversation so far, oldest first.
        pdf_base64: Optional document, base64 or a ``data:`` URL.
        pdf_images: Optional pre-rendered page images as inline references.
    """

    api_key: str | None = Field(
        None, validation_alias=AliasChoices("api_key", "apiKey")
    )
    messages: list[Message] = Field(default_factory=list)
    pdf_base64: str | None = Field(
        None, validation_alias=AliasChoices("pdf_base64", "pdfBase64")
    )
    pdf_images: list[Any] | None = Field(
        None, validation_alias=AliasChoices("pdf_images", "pdfImages")
    )

    @field_validator("messages")
    @classmethod
    def drop_invalid_image_blocks(cls, messages: list[Message]) -> list[Message]:
        """Remove image blocks whose uri is not an inline image reference."""
        cleaned: list[Message] = []
        for message in messages:
            if isinstance(message.content, list):
                blocks = [
                    block
                    for block in message.content
                    if not isinstance(block, ImageBlock) or is_inline_image(block.uri)
                ]
                message = message.model_copy(update={"content": blocks})
            cleaned.append(message)
        return cleaned


class ChatResponse(BaseModel):
    """Successful model answer."""

    success: bool = True
    response: str


class ErrorResponse(BaseModel):
    """Failure description returned when the model call fails.

    Attributes:
        error: Human readable error message.
        details: Diagnostic payload from the model provider, if any.
    """

    error: str
    details: Any | None = None


class StreamChunk(BaseModel):
    """A chunk of streamed response data.

    Attributes:
        content: The text content of this chunk.
        done: Whether this is the final chunk.
        status: Current processing status (received, extracting, generating, complete, error).
        error: Error message if something went wrong.
    """

    content: str
    done: bool
    status: StreamStatus | None = None
    error: str | None = None


class PDFUploadResponse(BaseModel):
    """Response after PDF upload processing.

    Attributes:
        filename: Name of the uploaded file.
        pages: Number of pages in the document.
        pdf_base64: The document as a ``data:application/pdf`` URL.
        pdf_images: Rendered page images, at most the configured page cap.
        success: Whether the upload was successful.
        error: Error message if upload failed.
    """

    filename: str
    pages: int
    pdf_base64: str
    pdf_images: list[str] = Field(default_factory=list)
    success: bool
    error: str | None = None
