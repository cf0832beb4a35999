"""ResearchCore - chat with a single research document.

Combines httpx for backend access, NiceGUI for visualization,
and Pydantic for data validation.

Components:
    - client: HTTP access to the analysis backend
    - ingestion: PDF/URL submission that yields a session
    - session: Active-session state and view switching
    - conversation: Session-scoped question/answer transcript
    - ui: Web interface for ingestion and chat
    - models: Session, transcript and payload schemas
"""

__version__ = "1.0.0"
