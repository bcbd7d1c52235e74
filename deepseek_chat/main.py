"""Application entry point.

Serves the chat pages and the HTTP API from one uvicorn process by default.
Settings come from the environment and an optional .env file.
"""

import logging
import os
import subprocess
import sys

from dotenv import load_dotenv

# Keys and settings must be in the environment before the client is configured
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))


def run_integrated() -> None:
    """Mount the NiceGUI pages onto the FastAPI app and serve both."""
    import uvicorn
    from nicegui import ui

    from deepseek_chat.api.app import create_app
    from deepseek_chat.ui import chat_page  # noqa: F401 - Registers the pages

    app = create_app()
    ui.run_with(
        app,
        title="DeepSeek Chat",
        favicon="💬",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "deepseek-chat-secret"),
    )

    logger.info(f"Chat pages on http://localhost:{PORT}/ and /deepseek-r1")
    logger.info(f"API docs on http://localhost:{PORT}/docs")

    uvicorn.run(app, host=HOST, port=PORT, log_level=os.getenv("LOG_LEVEL", "info").lower())


def run_separate() -> None:
    """Serve the API in a child process and the pages on port 8080.

    Stopping the pages also stops the API process.
    """
    from deepseek_chat.ui.chat_page import main as run_pages

    api_process = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn", "deepseek_chat.api.app:app",
            "--host", HOST, "--port", str(PORT), "--reload",
        ]
    )
    logger.info(f"API on http://localhost:{PORT} (pid {api_process.pid})")

    try:
        run_pages()
    finally:
        api_process.terminate()
        api_process.wait()


def main() -> None:
    """Start the server.

    RUN_MODE=separate serves the API and the pages on different ports.
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()
    logger.info(f"Starting DeepSeek Chat in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
