"""Backend client configuration with environment variable loading.

Pydantic-based configuration for the analysis backend connection.
The only required setting is the base address of the backend.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BACKEND_URL = "http://localhost:8000"


class ClientConfig(BaseModel):
    """Configuration for the analysis backend client.

    Attributes:
        backend_url: Base address of the backend (no trailing slash).
        request_timeout: Per-request timeout in seconds.
    """

    model_config = ConfigDict(validate_default=True)

    backend_url: str = Field(
        default_factory=lambda: os.getenv(
            "BACKEND_URL", os.getenv("API_BASE_URL", DEFAULT_BACKEND_URL)
        ),
        description="Base URL of the document analysis backend",
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("BACKEND_TIMEOUT", "120")),
        gt=0.0,
        description="Seconds to wait for a backend response",
    )

    @field_validator("backend_url")
    @classmethod
    def validate_backend_url(cls, v: str) -> str:
        """Validate that the backend URL is an http(s) address."""
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("Backend URL required. Set BACKEND_URL in .env")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Backend URL must start with http:// or https://, got {v!r}")
        return v


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If BACKEND_URL is empty or not an http(s) URL.
    """
    return ClientConfig()
