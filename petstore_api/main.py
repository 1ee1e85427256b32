"""FastAPI application entry point.

Builds the app with logging configured from settings, the request ID
middleware, envelope-rendering error handlers and the health router.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from petstore_api.config.settings import PetstoreSettings
from petstore_api.logging_config import configure_logging
from petstore_api.middleware.error_handler import register_error_handlers
from petstore_api.middleware.request_id import RequestIdMiddleware
from petstore_api.routers.health import create_health_router

logger = logging.getLogger(__name__)


def create_app(settings: PetstoreSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or PetstoreSettings()

    configure_logging(settings.log_level, json_format=settings.log_json)

    app = FastAPI(
        title="Petstore API",
        version="0.0.1",
    )

    register_error_handlers(app, expose_error_details=settings.expose_error_details)
    app.add_middleware(RequestIdMiddleware)
    app.include_router(create_health_router(service_name=settings.service_name))

    logger.info(
        "Created %s application for port %d",
        settings.service_name,
        settings.port,
        extra={"port": settings.port},
    )
    return app
