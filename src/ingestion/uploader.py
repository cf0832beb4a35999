"""Document ingestion: turns a selected PDF or a pasted URL into a Session.

Validation, draft state and submission are kept here so the view only
binds widgets to this object.
"""

import logging
from collections.abc import Callable

from src.client.backend import BackendClient, BackendError
from src.models.schemas import IngestMode, PdfFile, Session, UploadDraft

logger = logging.getLogger(__name__)

ONLY_PDF_MESSAGE = "Only PDF files are supported."


class Uploader:
    """Pre-session ingestion state for both input modes.

    Only one ingestion request may be in flight. ``uploading`` gates the
    submit path and is always reset when the request settles.
    """

    def __init__(
        self,
        backend: BackendClient,
        on_complete: Callable[[Session], None],
        on_change: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the uploader.

        Args:
            backend: Client used to reach the analysis backend.
            on_complete: Called exactly once per successful ingestion.
            on_change: Called whenever draft, error or uploading changes.
        """
        self._backend = backend
        self._on_complete = on_complete
        self._on_change = on_change
        self.mode: IngestMode = IngestMode.PDF
        self.draft = UploadDraft()
        self.uploading = False

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    @property
    def error(self) -> str | None:
        return self.draft.error

    @property
    def can_submit(self) -> bool:
        """Whether the active mode's submit control is enabled."""
        if self.uploading:
            return False
        if self.mode is IngestMode.PDF:
            return self.draft.file is not None
        return bool(self.draft.url)

    def set_mode(self, mode: IngestMode) -> None:
        """Switch input mode. The other mode's draft is left untouched."""
        self.mode = IngestMode(mode)
        self._changed()

    def select_file(self, file: PdfFile) -> bool:
        """Validate and adopt a file from the picker or a drop.

        Non-PDF files are rejected locally: the error is set and the
        previous draft file stays selected.

        Returns:
            True if the file became the current draft.
        """
        if not file.is_pdf:
            logger.info(f"Rejected {file.name}: media type {file.content_type!r}")
            self.draft.error = ONLY_PDF_MESSAGE
            self._changed()
            return False

        self.draft.file = file
        self.draft.error = None
        self._changed()
        return True

    def clear_file(self) -> None:
        self.draft.file = None
        self._changed()

    def set_url(self, url: str | None) -> None:
        self.draft.url = url or ""
        self._changed()

    async def submit(self) -> Session | None:
        """Submit the active mode's draft to the backend.

        No-op when the draft is empty or an upload is already running.
        On failure the draft is preserved and ``error`` is set.

        Returns:
            The new Session, or None if nothing was created.
        """
        if not self.can_submit:
            return None

        mode = self.mode
        file = self.draft.file
        self.uploading = True
        self.draft.error = None
        self._changed()

        try:
            if mode is IngestMode.PDF and file is not None:
                uploaded = await self._backend.upload_file(file)
                session = Session(id=uploaded.session_id, display_name=uploaded.filename)
            else:
                ingested = await self._backend.upload_url(self.draft.url)
                session = Session(id=ingested.session_id, display_name=ingested.source)
        except BackendError as e:
            logger.warning(f"Ingestion ({mode.value}) failed: {e.message}")
            self.draft.error = e.message
            return None
        finally:
            self.uploading = False
            self._changed()

        logger.info(f"Ingested {session.display_name!r} as session {session.id}")
        self._on_complete(session)
        return session
