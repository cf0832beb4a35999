"""HTTP access to the document analysis backend.

Responsibilities:
    - Multipart PDF upload and URL ingestion
    - Session-scoped question answering
    - Normalizing HTTP, transport and schema failures into BackendError

Built on httpx's async client. Holds no session state of its own.
"""

from src.client.backend import BackendClient, BackendError, get_backend_client
from src.client.config import ClientConfig, get_client_config

__all__ = [
    "BackendClient",
    "BackendError",
    "ClientConfig",
    "get_backend_client",
    "get_client_config",
]
