"""PDF parsing utilities for document processing.

Turns an uploaded document into prompt material.

Responsibilities:
    - Payload decoding (raw bytes, base64, data URLs)
    - PDF text extraction with pypdf, truncated for prompt use
    - Page rendering to inline PNG images with PyMuPDF

Both extraction paths are best-effort: failures come back as empty
results with an error description rather than exceptions.
"""

from src.parsing.pdf_parser import (
    PDFContent,
    PDFParseError,
    TextExtraction,
    decode_document,
    extract_text,
    parse_pdf,
    truncate_text,
)
from src.parsing.rasterizer import PageRendering, render_pages, render_pages_async

__all__ = [
    "PDFContent",
    "PDFParseError",
    "PageRendering",
    "TextExtraction",
    "decode_document",
    "extract_text",
    "parse_pdf",
    "render_pages",
    "render_pages_async",
    "truncate_text",
]
