"""Pydantic models for session state and backend payloads.

Provides type safety and validation for everything that crosses the
backend boundary or lives in the in-memory session state.

Models:
    - Session: Active document binding (id + display name)
    - Exchange: One transcript entry (role + content)
    - PendingRequest: The single in-flight question
    - PdfFile / UploadDraft: Pre-session ingestion input
    - Upload*/Ask*: Request and response bodies of the backend
"""

from src.models.schemas import (
    PDF_MEDIA_TYPE,
    AskRequest,
    AskResponse,
    ErrorResponse,
    Exchange,
    IngestMode,
    PdfFile,
    PendingRequest,
    Role,
    Session,
    UploadDraft,
    UploadFileResponse,
    UploadUrlRequest,
    UploadUrlResponse,
)

__all__ = [
    "PDF_MEDIA_TYPE",
    "AskRequest",
    "AskResponse",
    "ErrorResponse",
    "Exchange",
    "IngestMode",
    "PdfFile",
    "PendingRequest",
    "Role",
    "Session",
    "UploadDraft",
    "UploadFileResponse",
    "UploadUrlRequest",
    "UploadUrlResponse",
]
