"""PDF upload endpoint for document preparation.

Validates the file, counts its pages, and renders page images so the
client can send them back with each chat request. Nothing is stored.
"""

import asyncio
import base64
import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from src.models.schemas import PDFUploadResponse
from src.parsing.pdf_parser import MAX_FILE_SIZE, PDFParseError, parse_pdf
from src.parsing.rasterizer import render_pages_async
from src.pipeline.config import PipelineConfig, get_pipeline_config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])

# 10MB limit matches pdf_parser constant
MAX_UPLOAD_SIZE = MAX_FILE_SIZE


def _validate_file_extension(filename: str | None) -> str:
    """Validate that file has .pdf extension.

    Args:
        filename: The uploaded filename.

    Returns:
        The validated filename.

    Raises:
        HTTPException: 400 if extension is invalid.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    if not filename.lower().endswith(".pdf"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are accepted",
        )

    return filename


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_UPLOAD_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


@router.post("/pdf", response_model=PDFUploadResponse)
async def upload_pdf(
    file: UploadFile,
    config: PipelineConfig = Depends(get_pipeline_config),
) -> PDFUploadResponse:
    """Upload a PDF and get it back ready for chat requests.

    Args:
        file: The uploaded PDF file (multipart/form-data).

    Returns:
        PDFUploadResponse with the document as a data URL and up to
        ``page_cap`` rendered page images.

    Raises:
        400: Invalid file (not PDF, empty, corrupt).
        413: File exceeds 10MB limit.
    """
    filename = _validate_file_extension(file.filename)
    content = await _read_and_validate_size(file)

    try:
        pdf_content = await asyncio.to_thread(parse_pdf, content, MAX_UPLOAD_SIZE)
    except PDFParseError as e:
        logger.warning(f"PDF parse error for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    rendering = await render_pages_async(content, config)
    logger.info(
        f"Prepared PDF: {filename} ({pdf_content.pages} pages, "
        f"{len(rendering.images)} rendered)"
    )

    return PDFUploadResponse(
        filename=filename,
        pages=pdf_content.pages,
        pdf_base64="data:application/pdf;base64," + base64.b64encode(content).decode("ascii"),
        pdf_images=rendering.images,
        success=True,
        error=rendering.error,
    )
