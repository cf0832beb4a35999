"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - fake_backend: Scriptable in-process analysis backend
    - backend_client: BackendClient routed to fake_backend
    - unreachable_client: BackendClient whose transport refuses connections
    - sample_pdf / sample_txt: Files as the upload widget reports them
"""

import httpx
import pytest
from httpx import ASGITransport

from src.client.backend import BackendClient
from src.client.config import ClientConfig
from src.models.schemas import PdfFile
from tests.fake_backend import FakeBackend


@pytest.fixture
def client_config() -> ClientConfig:
    """Return a config pointing at the in-process backend."""
    return ClientConfig(backend_url="http://test", request_timeout=5.0)


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def backend_client(fake_backend: FakeBackend, client_config: ClientConfig) -> BackendClient:
    """Create a BackendClient talking to the fake backend over ASGI."""
    return BackendClient(config=client_config, transport=ASGITransport(app=fake_backend.app))


@pytest.fixture
def unreachable_client(client_config: ClientConfig) -> BackendClient:
    """Create a BackendClient whose every request fails to connect."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return BackendClient(config=client_config, transport=httpx.MockTransport(refuse))


@pytest.fixture
def sample_pdf() -> PdfFile:
    """Minimal PDF as reported by the picker."""
    return PdfFile(
        name="paper.pdf",
        content_type="application/pdf",
        content=b"%PDF-1.4\n%%EOF",
    )


@pytest.fixture
def sample_txt() -> PdfFile:
    """A non-PDF selection for negative-case tests."""
    return PdfFile(name="notes.txt", content_type="text/plain", content=b"hello world")
