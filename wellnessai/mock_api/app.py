"""FastAPI application factory for the mock backend.

Serves the mock auth path plus chat, usage, subscription and admin data so
the client can run without the real API.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wellnessai.mock_api.data import MockBackend
from wellnessai.mock_api.routes import routers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log startup and shutdown of the mock server.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting WellnessAI mock API...")
    yield
    logger.info("Shutting down WellnessAI mock API...")


def create_app(backend: MockBackend | None = None) -> FastAPI:
    """Create and configure the mock API application.

    Args:
        backend: State to serve; a freshly seeded one by default.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="WellnessAI Mock API",
        description=(
            "In-memory stand-in for the WellnessAI REST API. Demo accounts: "
            "admin@example.com and user@example.com, password 'password123'."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.backend = backend or MockBackend()

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in routers:
        application.include_router(router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "wellnessai-mock-api"}

    return application
