"""Document ingestion for the pre-session view.

Responsibilities:
    - PDF media-type validation before any network call
    - Draft state for file and URL modes
    - Single-flight submission to the backend
"""

from src.ingestion.uploader import ONLY_PDF_MESSAGE, Uploader

__all__ = ["ONLY_PDF_MESSAGE", "Uploader"]
