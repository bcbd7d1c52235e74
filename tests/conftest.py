"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - credentials: Keys for both supported models
    - settings: Client settings pointing at a test endpoint
    - recorded_requests / make_client: Completion client over httpx.MockTransport
    - docx_bytes / blank_pdf_bytes: Documents generated in memory
    - async_client: HTTPX client for API testing
"""

import io
from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from docx import Document
from httpx import ASGITransport, AsyncClient
from pypdf import PdfWriter

from deepseek_chat.api import app
from deepseek_chat.client.completion import RemoteCompletionClient
from deepseek_chat.client.config import ClientSettings, Credentials
from tests.helpers import TEST_API_URL

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def credentials() -> Credentials:
    """Keys for both supported models."""
    return Credentials(deepseek_v3="sk-v3-test", deepseek_r1="sk-r1-test")


@pytest.fixture
def settings() -> ClientSettings:
    """Client settings pointing at a test endpoint."""
    return ClientSettings(api_url=TEST_API_URL, referer="http://test", timeout=5.0)


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by clients created with make_client."""
    return []


@pytest.fixture
def make_client(
    settings: ClientSettings,
    credentials: Credentials,
    recorded_requests: list[httpx.Request],
) -> Callable[..., RemoteCompletionClient]:
    """Factory for completion clients backed by a mock transport.

    Returns:
        Callable taking a handler and optional credentials.
    """

    def factory(
        handler: Handler, creds: Credentials | None = None
    ) -> RemoteCompletionClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        return RemoteCompletionClient(
            settings=settings,
            credentials=creds if creds is not None else credentials,
            http_client=http_client,
        )

    return factory


@pytest.fixture
def docx_bytes() -> bytes:
    """A DOCX document with two paragraphs."""
    document = Document()
    document.add_paragraph("Quarterly report")
    document.add_paragraph("Revenue grew by 12 percent.")
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def blank_pdf_bytes() -> bytes:
    """A valid two-page PDF without any text."""
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    writer.add_blank_page(width=612, height=792)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
