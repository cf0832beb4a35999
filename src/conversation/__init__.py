"""Conversation engine for an active document session.

Owns the append-only transcript and sends each question scoped to the
session id. Holds no reference to the view beyond a change callback.
"""

from src.conversation.engine import GREETING_TEMPLATE, ConversationEngine, greeting_for

__all__ = ["GREETING_TEMPLATE", "ConversationEngine", "greeting_for"]
