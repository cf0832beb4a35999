"""Test package for ResearchCore.

Structure:
    - unit/: Individual components with the backend mocked out
    - integration/: Real BackendClient against an in-process fake backend

Leverages pytest with pytest-check for soft assertions.
"""
