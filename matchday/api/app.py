"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from matchday.api import websocket
from matchday.api.routes import health, matches
from matchday.config import APP_DESCRIPTION, APP_NAME, VERSION
from matchday.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    from matchday.database import init_db

    # Startup
    setup_logging()
    logger.info(f"Starting {APP_NAME} {VERSION}...")

    init_db()
    app.state.ws_hub = websocket.WebSocketHub()

    logger.info(f"{APP_NAME} ready")

    yield

    # Shutdown
    logger.info(f"{APP_NAME} stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=f"{APP_NAME} API",
        description=APP_DESCRIPTION,
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(matches.router, prefix="/api/v1", tags=["Matches"])
    app.include_router(websocket.router, tags=["Live Updates"])

    return app


app = create_app()
