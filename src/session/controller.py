"""Active-session state and the ingestion/conversation view switch."""

import logging
from collections.abc import Callable
from enum import Enum

from src.client.backend import BackendClient
from src.conversation.engine import ConversationEngine
from src.models.schemas import Session

logger = logging.getLogger(__name__)


class View(str, Enum):
    """Top-level view shown for the current controller state."""

    INGESTION = "ingestion"
    CONVERSATION = "conversation"


class SessionStateError(Exception):
    """Raised on a transition the controller does not allow."""

    pass


class SessionController:
    """Single source of truth for whether a session is active.

    Exactly two transitions exist: ``activate`` (absent -> present) after a
    successful ingestion, and ``discard`` (present -> absent) on an explicit
    "change document". The controller performs no I/O.
    """

    def __init__(
        self,
        backend: BackendClient,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._backend = backend
        self._on_change = on_change
        self._session: Session | None = None
        self._engine: ConversationEngine | None = None

    @property
    def active_session(self) -> Session | None:
        return self._session

    @property
    def engine(self) -> ConversationEngine | None:
        """Conversation engine for the active session, if any."""
        return self._engine

    @property
    def view(self) -> View:
        return View.INGESTION if self._session is None else View.CONVERSATION

    def activate(self, session: Session) -> ConversationEngine:
        """Bind a freshly ingested session and start its conversation.

        Args:
            session: Session produced by a successful ingestion.

        Returns:
            The new conversation engine, seeded with its greeting.

        Raises:
            SessionStateError: If a session is already active.
        """
        if self._session is not None:
            raise SessionStateError(
                f"Session {self._session.id} is still active; discard it first"
            )

        self._session = session
        self._engine = ConversationEngine(session, self._backend)
        logger.info(f"Activated session {session.id} ({session.display_name})")
        self._changed()
        return self._engine

    def discard(self) -> None:
        """Drop the active session and its transcript. No backend call.

        Raises:
            SessionStateError: If no session is active.
        """
        if self._session is None or self._engine is None:
            raise SessionStateError("No active session to discard")

        logger.info(f"Discarded session {self._session.id}")
        self._engine.close()
        self._engine = None
        self._session = None
        self._changed()

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
