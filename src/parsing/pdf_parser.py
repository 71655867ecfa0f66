"""PDF text extraction using pypdf.

Decodes document payloads (raw bytes, base64, or ``data:`` URLs), extracts
text, and truncates it for prompt use. ``parse_pdf`` raises on bad input;
``extract_text`` never does and reports failure as an empty result carrying
the error description.
"""

import base64
import binascii
import io
import logging

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from src.pipeline.config import PipelineConfig, get_pipeline_config

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"
# Readers accept junk before the header as long as it appears this early.
HEADER_SEARCH_WINDOW = 1024


class PDFContent(BaseModel):
    """Extracted content from a PDF file.

    Attributes:
        text: Combined text content from all pages.
        pages: Total number of pages in the document.
    """

    text: str
    pages: int = Field(ge=0)


class TextExtraction(BaseModel):
    """Outcome of best-effort text extraction.

    Attributes:
        text: Extracted (possibly truncated) text, empty when unavailable.
        error: Why extraction failed, None on success.
    """

    text: str = ""
    error: str | None = None

    @property
    def available(self) -> bool:
        return self.error is None


class PDFParseError(Exception):
    """Raised when PDF parsing fails."""

    pass


def decode_document(payload: bytes | str) -> bytes:
    """Decode a document payload into raw bytes.

    Bytes are already decoded and pass through unchanged. Strings are
    treated as base64, with any ``data:...;base64,`` prefix stripped first.

    Raises:
        PDFParseError: If the payload is not valid base64.
    """
    if isinstance(payload, bytes):
        return payload

    if "," in payload:
        payload = payload.split(",", 1)[1]

    try:
        return base64.b64decode(payload.strip(), validate=False)
    except (binascii.Error, ValueError) as e:
        raise PDFParseError(f"Invalid base64 document payload: {e}") from e


def truncate_text(text: str, limit: int, marker: str) -> str:
    """Cut text to limit characters and append marker after a blank line.

    Text at or below the limit is returned unchanged.
    """
    if len(text) <= limit:
        return text
    return f"{text[:limit]}\n\n{marker}"


def _validate_pdf_bytes(file_content: bytes, max_size: int | None = None) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.
        max_size: Size limit in bytes, or None for no limit.

    Raises:
        PDFParseError: If validation fails.
    """
    if not file_content:
        raise PDFParseError("Empty file provided")

    if max_size is not None and len(file_content) > max_size:
        size_mb = len(file_content) / (1024 * 1024)
        limit_mb = max_size / (1024 * 1024)
        raise PDFParseError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:g}MB)"
        )

    if PDF_MAGIC_BYTES not in file_content[:HEADER_SEARCH_WINDOW]:
        raise PDFParseError("Invalid PDF: no PDF header found")


def parse_pdf(file_content: bytes, max_size: int | None = None) -> PDFContent:
    """Parse a PDF file and extract its text content.

    Args:
        file_content: Raw bytes of the PDF file.
        max_size: Reject files larger than this many bytes. Unlimited when
            omitted.

    Returns:
        PDFContent with extracted text and page count.

    Raises:
        PDFParseError: If the file is invalid, too large, empty, or corrupt.
    """
    _validate_pdf_bytes(file_content, max_size)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    if pages == 0:
        raise PDFParseError("PDF contains no pages")

    text_parts: list[str] = []
    for i, page in enumerate(reader.pages):
        try:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
        except Exception as e:
            logger.warning(f"Failed to extract text from page {i + 1}: {e}")
            continue

    text = "\n\n".join(text_parts)

    if not text.strip():
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return PDFContent(text=text, pages=pages)


def extract_text(
    payload: bytes | str,
    config: PipelineConfig | None = None,
) -> TextExtraction:
    """Extract prompt-ready text from a document payload.

    Failures are contained: the result carries empty text and the error
    description instead of raising.

    Args:
        payload: Raw PDF bytes, base64 text, or a ``data:`` URL.
        config: Pipeline limits. Service defaults when omitted.

    Returns:
        TextExtraction with stripped, truncated text.
    """
    config = config or get_pipeline_config()

    try:
        content = parse_pdf(decode_document(payload))
    except PDFParseError as e:
        logger.warning(f"PDF parse failed: {e}")
        return TextExtraction(error=str(e))

    text = truncate_text(
        content.text.strip(), config.max_text_chars, config.truncation_marker
    )
    return TextExtraction(text=text)
