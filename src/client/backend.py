"""HTTP client for the document analysis backend.

Wraps the three backend endpoints (``/upload``, ``/upload-url``, ``/ask``)
behind one async service and normalizes every failure mode into a single
``BackendError`` carrying a user-facing message:

1. **Non-2xx status** - failure even when the body is valid JSON. The
   backend's ``detail`` string is preferred as the message.
2. **Transport failure** - connection refused, DNS, timeouts.
3. **Malformed body** - not JSON, or JSON missing an expected field.

Cases 2 and 3 fall back to the per-operation generic message.
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from src.client.config import ClientConfig, get_client_config
from src.models.schemas import (
    AskRequest,
    AskResponse,
    ErrorResponse,
    PdfFile,
    UploadFileResponse,
    UploadUrlRequest,
    UploadUrlResponse,
)

logger = logging.getLogger(__name__)

UPLOAD_FILE_FAILED = "Failed to upload file"
UPLOAD_URL_FAILED = "Failed to process URL"
ASK_FAILED = "Failed to get answer"

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class BackendError(Exception):
    """Raised when a backend call does not yield a usable response.

    Attributes:
        message: Human-readable reason, safe to show to the user.
        status_code: HTTP status when the backend answered, else None.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _detail_from(body: Any) -> str | None:
    """Return the backend's ``detail`` string, if it sent a usable one."""
    try:
        detail = ErrorResponse.model_validate(body).detail
    except ValidationError:
        return None
    if detail and detail.strip():
        return detail
    return None


def _parse_response(
    response: httpx.Response,
    model: type[ResponseModel],
    generic_message: str,
) -> ResponseModel:
    """Validate a backend response against the expected success model.

    Args:
        response: The raw HTTP response.
        model: Pydantic model the success body must satisfy.
        generic_message: Message used when the backend gives no detail.

    Returns:
        The validated success body.

    Raises:
        BackendError: On non-2xx status, non-JSON body, or missing fields.
    """
    try:
        body = response.json()
    except ValueError as e:
        logger.warning(f"Non-JSON response from {response.request.url} ({response.status_code})")
        raise BackendError(generic_message, response.status_code) from e

    if not response.is_success:
        message = _detail_from(body) or generic_message
        logger.warning(f"Backend returned {response.status_code} for {response.request.url}: {message}")
        raise BackendError(message, response.status_code)

    try:
        return model.model_validate(body)
    except ValidationError as e:
        logger.warning(f"Malformed response from {response.request.url}: {e}")
        raise BackendError(generic_message, response.status_code) from e


class BackendClient:
    """Async client for the analysis backend.

    Opens one ``httpx.AsyncClient`` per call, so an instance holds no
    connection state and can be shared by every browser session.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the backend client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used by tests to route
                       requests to an in-process backend.
        """
        self._config = config or get_client_config()
        self._transport = transport

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.backend_url,
            timeout=self._config.request_timeout,
            transport=self._transport,
        )

    async def _post(
        self,
        path: str,
        model: type[ResponseModel],
        generic_message: str,
        **kwargs: Any,
    ) -> ResponseModel:
        async with self._http() as client:
            try:
                response = await client.post(path, **kwargs)
            except httpx.HTTPError as e:
                logger.error(f"Request to {path} failed: {e!r}")
                raise BackendError(generic_message) from e
        return _parse_response(response, model, generic_message)

    async def upload_file(self, file: PdfFile) -> UploadFileResponse:
        """Upload a PDF as multipart form field ``file``.

        Args:
            file: The selected PDF.

        Returns:
            Session id and filename assigned by the backend.

        Raises:
            BackendError: If the upload fails for any reason.
        """
        logger.info(f"Uploading {file.name} ({file.size_label})")
        return await self._post(
            "/upload",
            UploadFileResponse,
            UPLOAD_FILE_FAILED,
            files={"file": (file.name, file.content, file.content_type)},
        )

    async def upload_url(self, url: str) -> UploadUrlResponse:
        """Ask the backend to fetch and ingest a remote document.

        Raises:
            BackendError: If ingestion fails for any reason.
        """
        logger.info(f"Submitting URL for ingestion: {url}")
        payload = UploadUrlRequest(url=url)
        return await self._post(
            "/upload-url",
            UploadUrlResponse,
            UPLOAD_URL_FAILED,
            json=payload.model_dump(),
        )

    async def ask(self, question: str, session_id: str) -> AskResponse:
        """Ask a question scoped to one ingested document.

        Args:
            question: The user's question.
            session_id: Backend-issued session the question belongs to.

        Returns:
            The backend's answer.

        Raises:
            BackendError: If no answer could be obtained.
        """
        payload = AskRequest(question=question, session_id=session_id)
        return await self._post(
            "/ask",
            AskResponse,
            ASK_FAILED,
            json=payload.model_dump(),
        )


# Module-level singleton instance
_backend_client: BackendClient | None = None


def get_backend_client() -> BackendClient:
    """Get or create the global backend client.

    Returns:
        The BackendClient instance.
    """
    global _backend_client
    if _backend_client is None:
        _backend_client = BackendClient()
    return _backend_client
