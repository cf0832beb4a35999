"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and derived properties
    - client/: Configuration loading and validation
    - ingestion/, session/, conversation/: State transitions and gates
    - ui/: Markdown rendering

The backend is a MagicMock spec'd on BackendClient. No network I/O.
"""
