"""Integration tests for components working together as a system.

Coverage:
    - BackendClient encoding and failure normalization over real HTTP semantics
    - Full ingestion -> conversation -> discard cycle
    - Stale answers after a session is discarded

Requests are served by tests/fake_backend.py (FastAPI) through
httpx.ASGITransport; connection failures use httpx.MockTransport.
"""
