"""FastAPI application for the chat and upload endpoints."""

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deepseek_chat import __version__
from deepseek_chat.api.routes import router

logger = logging.getLogger(__name__)

SERVICE_NAME = "deepseek-chat"


def cors_origins(raw: str | None = None) -> list[str]:
    """Allowed browser origins from CHAT_CORS_ORIGINS (comma separated, default any)."""
    value = raw if raw is not None else os.getenv("CHAT_CORS_ORIGINS", "*")
    origins = [origin.strip() for origin in value.split(",") if origin.strip()]
    return origins or ["*"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(f"{app.title} {app.version} ready")
    yield
    logger.info(f"{app.title} stopped")


async def health() -> dict[str, str]:
    return {"status": "healthy", "service": SERVICE_NAME}


def create_app(origins: list[str] | None = None) -> FastAPI:
    """Build the API app.

    Args:
        origins: Browser origins allowed by CORS. Read from the environment if omitted.

    Returns:
        The app with the chat router and ``/health`` registered.
    """
    origins = origins if origins is not None else cors_origins()
    application = FastAPI(
        title="DeepSeek Chat API",
        description="Proxies conversations to hosted DeepSeek models and extracts attachment text.",
        version=__version__,
        lifespan=lifespan,
    )

    # Credentials only make sense with an explicit origin list
    application.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    application.include_router(router)
    application.add_api_route("/health", health, methods=["GET"], tags=["health"])
    return application


app = create_app()
