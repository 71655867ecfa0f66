"""Shared test data builders."""

import os
from collections.abc import Sequence

import fitz  # PyMuPDF

# 1x1 transparent PNG
PNG_DATA_URL = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


def build_pdf(pages: Sequence[str], width: float = 200, height: float = 200) -> bytes:
    """Create a PDF with one page per string."""
    doc = fitz.open()
    try:
        for text in pages:
            page = doc.new_page(width=width, height=height)
            if text:
                page.insert_text((20, 40), text, fontsize=11)
        return doc.tobytes()
    finally:
        doc.close()


def build_padded_pdf(text: str, padding: int) -> bytes:
    """Create a one-page PDF carrying an incompressible embedded file.

    The attachment pushes the file size past ``padding`` bytes without
    adding pages or text.
    """
    doc = fitz.open()
    try:
        page = doc.new_page(width=200, height=200)
        page.insert_text((20, 40), text, fontsize=11)
        doc.embfile_add("padding.bin", os.urandom(padding))
        return doc.tobytes()
    finally:
        doc.close()
