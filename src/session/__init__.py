"""Session lifecycle: which document, if any, the user is talking to."""

from src.session.controller import SessionController, SessionStateError, View

__all__ = ["SessionController", "SessionStateError", "View"]
