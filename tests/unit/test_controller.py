"""Unit tests for SessionController transitions."""

from unittest.mock import MagicMock

import pytest

from src.client.backend import BackendClient
from src.models.schemas import Role, Session
from src.session.controller import SessionController, SessionStateError, View


@pytest.fixture
def backend() -> MagicMock:
    return MagicMock(spec=BackendClient)


@pytest.fixture
def controller(backend: MagicMock) -> SessionController:
    return SessionController(backend)


class TestTransitions:
    def test_initially_absent(self, controller: SessionController) -> None:
        assert controller.active_session is None
        assert controller.engine is None
        assert controller.view is View.INGESTION

    def test_activate_switches_to_conversation(self, controller: SessionController) -> None:
        session = Session(id="s1", display_name="paper.pdf")

        engine = controller.activate(session)

        assert controller.active_session == session
        assert controller.engine is engine
        assert engine.session == session
        assert controller.view is View.CONVERSATION

    def test_activate_twice_rejected(self, controller: SessionController) -> None:
        controller.activate(Session(id="s1", display_name="a.pdf"))

        with pytest.raises(SessionStateError, match="still active"):
            controller.activate(Session(id="s2", display_name="b.pdf"))

        assert controller.active_session.id == "s1"

    def test_discard_returns_to_ingestion(
        self, controller: SessionController, backend: MagicMock
    ) -> None:
        engine = controller.activate(Session(id="s1", display_name="paper.pdf"))

        controller.discard()

        assert controller.active_session is None
        assert controller.engine is None
        assert controller.view is View.INGESTION
        assert engine.closed is True
        # discarding never talks to the backend
        assert backend.mock_calls == []

    def test_discard_without_session_rejected(self, controller: SessionController) -> None:
        with pytest.raises(SessionStateError):
            controller.discard()

    def test_new_session_starts_fresh(self, controller: SessionController) -> None:
        """After discard, a new session gets only its own greeting."""
        first = controller.activate(Session(id="s1", display_name="old.pdf"))
        first.input_text = "left over"
        controller.discard()

        second = controller.activate(Session(id="s2", display_name="new.pdf"))

        assert second is not first
        assert len(second.transcript) == 1
        assert second.transcript[0].role is Role.ASSISTANT
        assert "**new.pdf**" in second.transcript[0].content
        assert second.input_text == ""

    def test_change_callback(self, backend: MagicMock) -> None:
        views: list[View] = []
        controller = SessionController(backend, on_change=lambda: views.append(controller.view))

        controller.activate(Session(id="s1", display_name="paper.pdf"))
        controller.discard()

        assert views == [View.CONVERSATION, View.INGESTION]
