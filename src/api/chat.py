"""Chat endpoints for document questions.

Each request carries the whole conversation and, optionally, the document
and pre-rendered page images. The document pipeline builds the prompt and
the chat service answers it. Nothing is stored between requests.
"""

import logging
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse

from src.agent.chat_agent import ChatService, UpstreamInvocationError, get_chat_service
from src.agent.config import MissingAPIKeyError
from src.models.messages import Message
from src.models.schemas import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    StreamChunk,
    StreamStatus,
)
from src.pipeline.assembler import assemble_payload
from src.pipeline.config import PipelineConfig, get_pipeline_config
from src.pipeline.document import build_document

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])


def _require_api_key(service: ChatService, request: ChatRequest) -> str:
    """Resolve the API key for this request.

    Raises:
        HTTPException: 400 if no key is available.
    """
    try:
        return service.config.resolve_api_key(request.api_key)
    except MissingAPIKeyError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="API key is required",
        ) from e


async def _build_payload(request: ChatRequest, config: PipelineConfig) -> list[Message]:
    document = await build_document(request.pdf_base64, request.pdf_images, config)
    return assemble_payload(request.messages, document, config)


def _sse(chunk: StreamChunk) -> str:
    return f"data: {chunk.model_dump_json()}\n\n"


@router.post(
    "",
    response_model=ChatResponse,
    responses={500: {"model": ErrorResponse}},
)
async def chat(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),
    config: PipelineConfig = Depends(get_pipeline_config),
) -> ChatResponse:
    """Answer the latest question about the document.

    Raises:
        400: No API key in the request or environment.
        422: Malformed request body.
        500: The model call failed (body is ErrorResponse).
    """
    api_key = _require_api_key(service, request)
    payload = await _build_payload(request, config)

    answer = await service.get_response(payload, api_key=api_key)
    return ChatResponse(response=answer)


@router.post("/stream")
async def chat_stream(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),
    config: PipelineConfig = Depends(get_pipeline_config),
) -> StreamingResponse:
    """Stream the answer as Server-Sent Events of StreamChunk.

    Status chunks report progress; the final chunk has ``done=true`` and
    either ``status=complete`` or ``status=error`` with the error message.
    """
    api_key = _require_api_key(service, request)

    async def event_stream() -> AsyncGenerator[str]:
        yield _sse(StreamChunk(content="", done=False, status=StreamStatus.RECEIVED))

        if request.pdf_base64 or request.pdf_images:
            yield _sse(StreamChunk(content="", done=False, status=StreamStatus.EXTRACTING))
        payload = await _build_payload(request, config)

        yield _sse(StreamChunk(content="", done=False, status=StreamStatus.GENERATING))
        try:
            async for text in service.stream_response(payload, api_key=api_key):
                yield _sse(StreamChunk(content=text, done=False))
        except UpstreamInvocationError as e:
            yield _sse(
                StreamChunk(content="", done=True, status=StreamStatus.ERROR, error=str(e))
            )
            return

        yield _sse(StreamChunk(content="", done=True, status=StreamStatus.COMPLETE))

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
