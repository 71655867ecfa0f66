"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
error mapping, and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.agent.chat_agent import UpstreamInvocationError
from src.api.chat import router as chat_router
from src.api.routes import router as upload_router
from src.models.schemas import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Document Vision Chat API...")
    yield
    logger.info("Shutting down Document Vision Chat API...")


async def upstream_error_handler(
    request: Request, exc: UpstreamInvocationError
) -> JSONResponse:
    """Report a failed model call as HTTP 500 with provider details."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error=str(exc) or "Failed to process request",
            details=exc.details,
        ).model_dump(),
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Document Vision Chat API",
        description=(
            "Ask questions about an uploaded PDF. Extracted text and rendered "
            "page images are assembled into a multimodal prompt and answered "
            "by a hosted vision model. Stateless: the client sends the whole "
            "conversation with every request."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.add_exception_handler(UpstreamInvocationError, upstream_error_handler)

    application.include_router(chat_router)
    application.include_router(upload_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "document-vision-chat"}

    return application


app = create_app()
