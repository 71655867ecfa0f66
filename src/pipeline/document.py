"""Per-request document context.

Runs text extraction and page rendering concurrently and joins the results
into one ``ExtractedDocument``. Every failure is absorbed here, so callers
always receive a document, possibly empty.
"""

import asyncio
import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from src.models.messages import is_inline_image
from src.parsing.pdf_parser import PDFParseError, TextExtraction, decode_document, extract_text
from src.parsing.rasterizer import PageRendering, render_pages_async
from src.pipeline.config import PipelineConfig, get_pipeline_config

logger = logging.getLogger(__name__)


class ExtractedDocument(BaseModel):
    """Text and page images derived from one document.

    Attributes:
        text: Extracted text, empty when unavailable.
        page_images: Inline image references in page order.
    """

    model_config = ConfigDict(frozen=True)

    text: str = ""
    page_images: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.text and not self.page_images


def filter_inline_images(images: Iterable[object] | None) -> list[str]:
    """Keep only inline image references, preserving order."""
    if not images:
        return []
    return [uri for uri in images if is_inline_image(uri)]


async def build_document(
    payload: bytes | str | None,
    pre_rendered_images: Iterable[object] | None = None,
    config: PipelineConfig | None = None,
) -> ExtractedDocument:
    """Build the document context for one request.

    Caller-supplied images are filtered and capped. When any remain they
    replace server-side rendering; otherwise the document is rendered here.

    Args:
        payload: Document as raw bytes, base64, or ``data:`` URL. None means
            no document.
        pre_rendered_images: Page images already rendered by the caller.
        config: Pipeline limits. Service defaults when omitted.

    Returns:
        ExtractedDocument, empty if nothing could be extracted.
    """
    config = config or get_pipeline_config()
    images = filter_inline_images(pre_rendered_images)[: config.page_cap]

    if not payload:
        return ExtractedDocument(page_images=tuple(images))

    try:
        file_content = decode_document(payload)
    except PDFParseError as e:
        logger.warning(f"PDF decode failed: {e}")
        return ExtractedDocument(page_images=tuple(images))

    if images:
        extraction = await asyncio.to_thread(extract_text, file_content, config)
        rendering = PageRendering(images=images)
    else:
        extraction, rendering = await asyncio.gather(
            asyncio.to_thread(extract_text, file_content, config),
            render_pages_async(file_content, config),
        )

    _log_outcome(extraction, rendering)

    return ExtractedDocument(
        text=extraction.text,
        page_images=tuple(rendering.images[: config.page_cap]),
    )


def _log_outcome(extraction: TextExtraction, rendering: PageRendering) -> None:
    if not extraction.available:
        logger.info(f"Continuing without document text: {extraction.error}")
    if rendering.error:
        logger.info(f"Continuing without page images: {rendering.error}")
    logger.debug(
        f"Document context: {len(extraction.text)} chars, "
        f"{len(rendering.images)} page image(s)"
    )
