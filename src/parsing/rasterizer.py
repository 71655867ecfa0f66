"""PDF page rendering using PyMuPDF.

Renders the first pages of a document to PNG and returns them as inline
``data:image/png;base64,...`` references, in page order. Rendering is
best-effort: a page that fails is skipped, a document that cannot be opened
yields no images.
"""

import asyncio
import base64
import logging
import threading

import fitz  # PyMuPDF
from pydantic import BaseModel, Field

from src.pipeline.config import PipelineConfig, get_pipeline_config

logger = logging.getLogger(__name__)


class PageRendering(BaseModel):
    """Outcome of best-effort page rendering.

    Attributes:
        images: Inline image references, one per rendered page.
        page_count: Pages in the source document, 0 if it could not be opened.
        error: Why rendering failed as a whole, None otherwise.
    """

    images: list[str] = Field(default_factory=list)
    page_count: int = 0
    error: str | None = None


def _to_data_url(png_bytes: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("utf-8")


def render_pages(
    file_content: bytes,
    config: PipelineConfig | None = None,
    stop: threading.Event | None = None,
) -> PageRendering:
    """Render up to ``config.page_cap`` pages of a PDF (synchronous).

    Args:
        file_content: Raw PDF bytes.
        config: Pipeline limits. Service defaults when omitted.
        stop: Checked between pages; rendering ends early once set.

    Returns:
        PageRendering with images in page order.
    """
    config = config or get_pipeline_config()

    try:
        doc = fitz.open(stream=file_content, filetype="pdf")
    except Exception as e:
        logger.warning(f"PDF image render failed: {e}")
        return PageRendering(error=f"Failed to open PDF: {e}")

    try:
        page_count = len(doc)
        matrix = fitz.Matrix(config.render_scale, config.render_scale)
        images: list[str] = []

        for page_index in range(min(page_count, config.page_cap)):
            if stop is not None and stop.is_set():
                logger.info(f"Rendering stopped after {len(images)} page(s)")
                break
            try:
                pix = doc[page_index].get_pixmap(matrix=matrix)
                images.append(_to_data_url(pix.tobytes("png")))
            except Exception as e:
                logger.warning(f"Failed to render page {page_index + 1}: {e}")
                continue

        return PageRendering(images=images, page_count=page_count)
    finally:
        doc.close()


async def render_pages_async(
    file_content: bytes,
    config: PipelineConfig | None = None,
) -> PageRendering:
    """Render pages in a worker thread.

    Cancelling the awaiting task signals the worker to stop before the
    next page.
    """
    stop = threading.Event()
    try:
        return await asyncio.to_thread(render_pages, file_content, config, stop)
    except asyncio.CancelledError:
        stop.set()
        raise
