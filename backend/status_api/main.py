"""FastAPI application entrypoint."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import api_router
from .core.config import AppSettings, get_settings
from .core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifecycle hooks for startup and shutdown."""

    settings: AppSettings = app.state.settings
    setup_logging(settings.log_level, json_output=settings.log_json)

    logger.info(
        "application.startup",
        environment=settings.environment,
        version=settings.version,
        api_prefix=settings.api_prefix,
    )

    try:
        yield
    finally:
        logger.info("application.shutdown")


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Construct the FastAPI application instance."""

    settings = settings or get_settings()

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url="/redoc" if settings.enable_docs else None,
        openapi_url="/openapi.json" if settings.enable_docs else None,
        # Exact path matching: "/api/health/" is a 404, not a redirect.
        redirect_slashes=False,
        lifespan=lifespan,
    )
    application.state.settings = settings

    if settings.cors_allowed_origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_allowed_origins,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    application.include_router(api_router, prefix=settings.api_prefix)

    return application


app = create_app()
