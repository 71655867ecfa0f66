"""Conversation message models with multimodal content.

A message's content is either plain text or an ordered list of content
blocks. The two shapes are a tagged variant: code that needs blocks calls
``as_blocks`` instead of branching on the content type.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

INLINE_IMAGE_PREFIX = "data:image/"

Role = Literal["system", "user", "assistant"]


def is_inline_image(uri: object) -> bool:
    """Return True if uri is an inline image reference (``data:image/...``)."""
    return isinstance(uri, str) and uri.startswith(INLINE_IMAGE_PREFIX)


class TextBlock(BaseModel):
    """A text unit inside a structured message."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str

    def to_openai(self) -> dict[str, Any]:
        return {"type": "text", "text": self.text}


class ImageBlock(BaseModel):
    """An inline image unit inside a structured message.

    Attributes:
        uri: Inline image reference, e.g. ``data:image/png;base64,...``.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["image_url"] = "image_url"
    uri: str

    @model_validator(mode="before")
    @classmethod
    def accept_openai_shape(cls, data: Any) -> Any:
        """Accept ``{"image_url": {"url": ...}}`` as sent by chat clients."""
        if isinstance(data, dict) and "uri" not in data:
            image_url = data.get("image_url")
            if isinstance(image_url, dict):
                return {**data, "uri": image_url.get("url")}
            if isinstance(image_url, str):
                return {**data, "uri": image_url}
        return data

    def to_openai(self) -> dict[str, Any]:
        return {"type": "image_url", "image_url": {"url": self.uri}}


ContentBlock = Annotated[TextBlock | ImageBlock, Field(discriminator="type")]
Content = str | list[ContentBlock]


def as_blocks(content: Content) -> list[ContentBlock]:
    """Convert message content to a block list.

    Plain text becomes a single text block. An existing block list is
    copied so the caller can append without touching the original.
    """
    if isinstance(content, str):
        return [TextBlock(text=content)]
    return list(content)


class Message(BaseModel):
    """One conversational turn.

    Attributes:
        role: Speaker identity (system, user, or assistant).
        content: Plain text or an ordered list of content blocks.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: Content

    def to_openai(self) -> dict[str, Any]:
        """Serialize to the chat-completions message shape."""
        if isinstance(self.content, str):
            content: Any = self.content
        else:
            content = [block.to_openai() for block in self.content]
        return {"role": self.role, "content": content}
