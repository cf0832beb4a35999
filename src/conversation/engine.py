"""Question/answer loop for one ingested document.

The engine owns the transcript of a single Session. Questions are
strictly serialized: while one is pending, further submissions are
ignored, so every answer lands directly after its own question.

Failures never interrupt the conversation. They are appended to the
transcript as an assistant entry starting with ``Error:``.
"""

import logging
from collections.abc import Callable

from src.client.backend import BackendClient, BackendError
from src.models.schemas import Exchange, PendingRequest, Role, Session

logger = logging.getLogger(__name__)

GREETING_TEMPLATE = "Hello! I've analyzed **{name}**. Ask me anything about it."


def greeting_for(session: Session) -> str:
    return GREETING_TEMPLATE.format(name=session.display_name)


class ConversationEngine:
    """Transcript, input buffer and single-flight request gate.

    Attributes:
        session: The read-only session this engine is bound to.
        input_text: Current contents of the question box.
        pending: The in-flight question, or None.
    """

    def __init__(
        self,
        session: Session,
        backend: BackendClient,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the engine and seed the greeting.

        Args:
            session: Session whose id scopes every question.
            backend: Client used to reach the analysis backend.
            on_change: Called after every transcript or pending change,
                       so the view can re-render and scroll to the end.
        """
        self.session = session
        self._backend = backend
        self.on_change = on_change
        self._transcript: list[Exchange] = [
            Exchange(role=Role.ASSISTANT, content=greeting_for(session))
        ]
        self.input_text = ""
        self.pending: PendingRequest | None = None
        self._closed = False

    @property
    def transcript(self) -> tuple[Exchange, ...]:
        """Snapshot of the transcript in display order."""
        return tuple(self._transcript)

    @property
    def is_pending(self) -> bool:
        return self.pending is not None

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def can_submit(self) -> bool:
        return bool(self.input_text.strip()) and not self.is_pending and not self._closed

    def _changed(self) -> None:
        if self.on_change is not None and not self._closed:
            self.on_change()

    def _append(self, role: Role, content: str) -> None:
        self._transcript.append(Exchange(role=role, content=content))

    def _is_stale(self, request: PendingRequest) -> bool:
        return self._closed or request.session_id != self.session.id

    def close(self) -> None:
        """Detach from the view. Late responses are dropped from now on."""
        self._closed = True
        self.on_change = None

    async def submit(self) -> None:
        """Send the buffered question and append the outcome.

        No-op when the trimmed input is empty, a request is pending, or
        the engine has been closed.
        """
        if not self.can_submit:
            return

        question = self.input_text.strip()
        self.input_text = ""
        self._append(Role.USER, question)
        request = PendingRequest(question=question, session_id=self.session.id)
        self.pending = request
        self._changed()

        try:
            response = await self._backend.ask(request.question, request.session_id)
        except BackendError as e:
            if self._is_stale(request):
                logger.info(f"Dropping failed answer for discarded session {request.session_id}")
                return
            logger.warning(f"Question failed for session {request.session_id}: {e.message}")
            self._append(Role.ASSISTANT, f"Error: {e.message}")
        else:
            if self._is_stale(request):
                logger.info(f"Dropping answer for discarded session {request.session_id}")
                return
            logger.info(f"Answer received for session {request.session_id}")
            self._append(Role.ASSISTANT, response.answer)
        finally:
            self.pending = None
            self._changed()
