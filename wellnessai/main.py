"""Main application entry point.

Runs the NiceGUI client (port 8080), the FastAPI mock backend (port 8000),
or both on one server. Environment variables are loaded from .env file.
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
logger = logging.getLogger(__name__)


def _start_client(ctx) -> None:
    """Register pages and the session restore/close hooks for ``ctx``."""
    from nicegui import app

    from wellnessai.state import restore_session
    from wellnessai.ui import register_pages

    register_pages(ctx)

    async def on_startup() -> None:
        restored = await restore_session(ctx.session, ctx.auth)
        logger.info(f"Session restored: {restored}")

    app.on_startup(on_startup)
    app.on_shutdown(ctx.aclose)


def run_ui() -> None:
    """Run the NiceGUI client against ``WELLNESS_API_BASE_URL``.

    With WELLNESS_USE_MOCK_API=true the mock backend runs in-process and no
    separate API server is needed.
    """
    from nicegui import ui

    from wellnessai.context import build_context

    ctx = build_context()
    _start_client(ctx)

    logger.info(f"Chat UI available at http://localhost:{os.getenv('UI_PORT', '8080')}/")
    logger.info(f"API base URL: {ctx.config.api_base_url} (mock={ctx.config.use_mock_api})")

    ui.run(
        title="WellnessAI",
        favicon="🌿",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("UI_PORT", "8080")),
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "wellnessai-secret"),
    )


def run_mock_api() -> None:
    """Run only the FastAPI mock backend."""
    import uvicorn

    from wellnessai.mock_api import create_app

    logger.info("Starting mock API on http://localhost:8000")
    logger.info("API docs available at http://localhost:8000/docs")

    uvicorn.run(
        create_app(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_integrated() -> None:
    """Run the mock API with NiceGUI mounted on the same server.

    The client talks to the mock routes in-process, so both are
    reachable on port 8000.
    """
    import httpx
    import uvicorn
    from nicegui import ui

    from wellnessai.context import build_context
    from wellnessai.mock_api import create_app

    api = create_app()
    ctx = build_context(transport=httpx.ASGITransport(app=api))
    _start_client(ctx)

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        api,
        title="WellnessAI",
        favicon="🌿",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "wellnessai-secret"),
    )

    logger.info("Starting integrated server on http://localhost:8000")
    logger.info("API docs available at http://localhost:8000/docs")

    uvicorn.run(
        api,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def main() -> None:
    """Application entry point.

    RUN_MODE selects what to start: ``ui`` (default), ``mock-api`` or
    ``integrated``.
    """
    mode = os.getenv("RUN_MODE", "ui").lower()

    logger.info(f"Starting WellnessAI in {mode} mode")

    if mode == "mock-api":
        run_mock_api()
    elif mode == "integrated":
        run_integrated()
    else:
        run_ui()


if __name__ in {"__main__", "__mp_main__"}:
    main()
