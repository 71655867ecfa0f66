"""Pytest fixtures and shared test configuration.

Fixtures:
    - make_pdf: Build real PDF bytes with PyMuPDF
    - sample_pdf: Three-page PDF with one line of text per page
    - fake_chat_service: ChatService that records payloads instead of calling a model
    - async_client: HTTPX client bound to the app with the fake chat service
"""

import base64
from collections.abc import AsyncGenerator, Callable, Sequence

import pytest
from httpx import ASGITransport, AsyncClient

from src.agent.chat_agent import ChatService, UpstreamInvocationError, get_chat_service
from src.agent.config import AgentConfig
from src.api.app import app
from src.models.messages import Message
from tests.fixtures import build_pdf


@pytest.fixture
def make_pdf() -> Callable[..., bytes]:
    """Return the PDF builder."""
    return build_pdf


@pytest.fixture
def sample_pdf() -> bytes:
    """Three-page PDF with one line of text per page."""
    return build_pdf(["Alpha page one", "Beta page two", "Gamma page three"])


@pytest.fixture
def sample_pdf_base64(sample_pdf: bytes) -> str:
    """Sample PDF as a data URL, as sent by browser clients."""
    return "data:application/pdf;base64," + base64.b64encode(sample_pdf).decode("ascii")


class FakeChatService(ChatService):
    """Records assembled payloads and answers with canned text."""

    def __init__(self) -> None:
        super().__init__(AgentConfig(api_key="sk-test-key"))
        self.payloads: list[list[Message]] = []
        self.api_keys: list[str | None] = []
        self.answer = "The document is about greek letters."
        self.error: UpstreamInvocationError | None = None

    async def get_response(
        self, messages: Sequence[Message], api_key: str | None = None
    ) -> str:
        self.payloads.append(list(messages))
        self.api_keys.append(api_key)
        if self.error is not None:
            raise self.error
        return self.answer

    async def stream_response(
        self, messages: Sequence[Message], api_key: str | None = None
    ) -> AsyncGenerator[str]:
        self.payloads.append(list(messages))
        self.api_keys.append(api_key)
        for word in self.answer.split(" "):
            yield word + " "
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_chat_service() -> FakeChatService:
    """Fresh fake chat service per test."""
    return FakeChatService()


@pytest.fixture
async def async_client(fake_chat_service: FakeChatService) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        AsyncClient whose chat service is the fake.
    """
    app.dependency_overrides[get_chat_service] = lambda: fake_chat_service
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
