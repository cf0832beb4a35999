"""Main application entry point.

Runs the NiceGUI client (port 8080) against an external analysis backend.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point.

    Set BACKEND_URL to point the client at the analysis backend.
    """
    from nicegui import ui

    from src.client.config import get_client_config
    from src.ui.chat_page import APP_TITLE, chat_page  # noqa: F401 - Registers the page

    config = get_client_config()
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))

    logger.info(f"Using analysis backend at {config.backend_url}")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    ui.run(
        title=APP_TITLE,
        host=host,
        port=port,
        favicon="✨",
        dark=True,
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "research-chat-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
