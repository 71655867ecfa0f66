"""Final prompt payload for the model call."""

import logging
from collections.abc import Sequence

from src.models.messages import Message
from src.pipeline.config import PipelineConfig
from src.pipeline.document import ExtractedDocument
from src.pipeline.merger import merge_document

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a multimodal document assistant. You have access to a PDF document "
    "provided by the user. Analyze the text and any table-like content to provide "
    "accurate, detailed answers. When you see tables, preserve their structure in "
    "your response. When PDF page images are provided, use them to interpret "
    "diagrams, charts, and visual layout."
)


def assemble_payload(
    history: Sequence[Message],
    document: ExtractedDocument | None = None,
    config: PipelineConfig | None = None,
) -> list[Message]:
    """Build the ordered message list for the model.

    The fixed system instruction comes first. Caller system messages are
    dropped; the remaining history keeps its order and the document is
    merged onto the last user turn.

    Args:
        history: Conversation supplied by the caller.
        document: Document context, None when no document was sent.
        config: Pipeline limits. Service defaults when omitted.

    Returns:
        Messages ready for the model invocation.
    """
    payload = [Message(role="system", content=SYSTEM_PROMPT)]
    payload.extend(message for message in history if message.role != "system")

    dropped = sum(1 for message in history if message.role == "system")
    if dropped:
        logger.debug(f"Dropped {dropped} caller system message(s)")

    if document is None:
        return payload
    return merge_document(payload, document, config)
