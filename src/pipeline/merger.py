"""Attach document content to the active user turn."""

from collections.abc import Sequence

from src.models.messages import ContentBlock, ImageBlock, Message, TextBlock, as_blocks
from src.pipeline.config import PipelineConfig, get_pipeline_config
from src.pipeline.document import ExtractedDocument, filter_inline_images


def document_blocks(
    document: ExtractedDocument,
    config: PipelineConfig | None = None,
) -> list[ContentBlock]:
    """Build content blocks for a document: labelled text first, then images."""
    config = config or get_pipeline_config()
    blocks: list[ContentBlock] = []

    if document.text:
        blocks.append(TextBlock(text=f"{config.document_label}\n{document.text}"))

    blocks.extend(ImageBlock(uri=uri) for uri in filter_inline_images(document.page_images))
    return blocks


def merge_document(
    messages: Sequence[Message],
    document: ExtractedDocument,
    config: PipelineConfig | None = None,
) -> list[Message]:
    """Return messages with the document attached to the last user turn.

    If the last message is from the user its content is extended in place
    of that message (plain text is kept as the first block). Otherwise a new
    user message holding only the document blocks is appended. Earlier
    messages are never touched, and the input sequence is not mutated.

    Args:
        messages: Conversation in order.
        document: Document context for this request.
        config: Pipeline limits. Service defaults when omitted.

    Returns:
        A new message list. Equal to the input when the document is empty.
    """
    merged = list(messages)
    blocks = document_blocks(document, config)
    if not blocks:
        return merged

    if merged and merged[-1].role == "user":
        last = merged[-1]
        merged[-1] = last.model_copy(update={"content": [*as_blocks(last.content), *blocks]})
    else:
        merged.append(Message(role="user", content=blocks))

    return merged
