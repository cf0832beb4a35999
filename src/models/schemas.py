from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

PDF_MEDIA_TYPE = "application/pdf"


class Role(str, Enum):
    """Author of a transcript entry."""

    USER = "user"
    ASSISTANT = "assistant"


class IngestMode(str, Enum):
    """Input mode of the ingestion view."""

    PDF = "pdf"
    URL = "url"


class Session(BaseModel):
    """Live binding to one ingested document.

    Attributes:
        id: Backend-issued session identifier, forwarded verbatim.
        display_name: Original filename or backend-derived source label.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    display_name: str


class Exchange(BaseModel):
    """A single transcript entry."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class PendingRequest(BaseModel):
    """The in-flight question, tagged with the session it was issued for."""

    question: str
    session_id: str


class PdfFile(BaseModel):
    """A locally selected file awaiting upload.

    Attributes:
        name: Filename as reported by the picker.
        content_type: Declared media type.
        content: Raw file bytes.
    """

    name: str
    content_type: str
    content: bytes = b""

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def size_label(self) -> str:
        """Size in megabytes with two decimals, e.g. ``1.25 MB``."""
        return f"{self.size / 1024 / 1024:.2f} MB"

    @property
    def is_pdf(self) -> bool:
        return self.content_type == PDF_MEDIA_TYPE


class UploadDraft(BaseModel):
    """Pre-session user input for both ingestion modes."""

    file: PdfFile | None = None
    url: str = ""
    error: str | None = None


class UploadFileResponse(BaseModel):
    """Success body of ``POST /upload``."""

    session_id: str = Field(..., min_length=1)
    filename: str


class UploadUrlRequest(BaseModel):
    """Request payload for ``POST /upload-url``."""

    url: str = Field(..., min_length=1)


class UploadUrlResponse(BaseModel):
    """Success body of ``POST /upload-url``."""

    session_id: str = Field(..., min_length=1)
    source: str


class AskRequest(BaseModel):
    """Request payload for ``POST /ask``.

    Attributes:
        question: The user's question, already trimmed.
        session_id: Session the question is scoped to.
    """

    question: str = Field(..., min_length=1)
    session_id: str = Field(..., min_length=1)

    @field_validator("question", mode="before")
    @classmethod
    def strip_question(cls, v: str) -> str:
        """Strip whitespace from question before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class AskResponse(BaseModel):
    """Success body of ``POST /ask``."""

    answer: str


class ErrorResponse(BaseModel):
    """Failure body shared by all backend endpoints."""

    detail: str | None = None
