"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from datafmt.api.routes import health, templates
from datafmt.config import VERSION
from datafmt.templates import get_registry
from datafmt.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    setup_logging()
    logger.info(f"Starting datafmt {VERSION}...")

    missing = get_registry().missing()
    if missing:
        logger.warning(f"Transforms without an implementation: {[k.value for k in missing]}")

    yield

    logger.info("datafmt stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="datafmt API",
        description="Fill {{placeholders}} in message templates from JSON data",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(templates.router, prefix="/api/v1", tags=["Templates"])

    return app


app = create_app()
