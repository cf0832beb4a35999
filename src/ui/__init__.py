"""NiceGUI interface - thin visualization layer over the session state.

Responsibilities:
    - Ingestion view: PDF drag-and-drop / picker and URL input
    - Conversation view: transcript bubbles, pending indicator, auto-scroll
    - "Change Document" to discard the active session

Contains no protocol logic. Binds widgets to Uploader, SessionController
and ConversationEngine and re-renders on their change callbacks.
"""
