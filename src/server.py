"""
Main FastAPI application for BlogWare.
"""

import os
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from loguru import logger

from .config import (
    APP_DESCRIPTION,
    APP_TITLE,
    CONTENT_DIR,
    LOG_DIR,
    LOG_LEVEL,
    LOG_RETENTION,
    LOG_ROTATION,
    NOT_FOUND_MESSAGE,
    VERSION,
)
from .routes.api import posts as api_posts
from .services.content_registry import ContentRegistry
from .services.content_store import ContentStore
from .services.slug_resolver import SlugResolver
from .utils.diagnostics import DiagnosticSink, log_load_failure


def configure_logging() -> None:
    """Add the rotating file sinks used in deployment."""
    os.makedirs(LOG_DIR, exist_ok=True)
    logger.add(
        f"{LOG_DIR}/blogware.log",
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        level=LOG_LEVEL,
    )
    logger.add(
        f"{LOG_DIR}/errors.log",
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        level="ERROR",
    )


def create_app(
    content_dir: Union[str, Path] = CONTENT_DIR,
    sink: DiagnosticSink = log_load_failure,
    log_to_files: bool = True,
    missing_field_policy: Optional[str] = None,
) -> FastAPI:
    """Build the application around a content directory."""
    if log_to_files:
        configure_logging()

    app = FastAPI(title=APP_TITLE, description=APP_DESCRIPTION, version=VERSION)

    registry = ContentRegistry(content_dir)
    store = ContentStore(registry)
    resolver_options = {}
    if missing_field_policy is not None:
        resolver_options["missing_field_policy"] = missing_field_policy
    app.state.registry = registry
    app.state.resolver = SlugResolver(store, sink=sink, **resolver_options)

    app.include_router(api_posts.router, prefix="/api")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            message = NOT_FOUND_MESSAGE
        else:
            message = exc.detail
        return JSONResponse(
            {"status": exc.status_code, "message": message},
            status_code=exc.status_code,
        )

    @app.on_event("startup")
    async def startup_event():
        try:
            count = registry.refresh()
            logger.info(f"{APP_TITLE} started with {count} posts")
        except Exception as e:
            logger.error(f"Error during application startup: {str(e)}")

    return app
