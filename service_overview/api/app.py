"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from service_overview.core.config import Settings, get_settings
from service_overview.core.configuration import load_configuration
from service_overview.core.logging import configure_logging, get_logger
from service_overview.overview.service import OverviewService

logger = get_logger("api")


def _install(app: FastAPI, service: OverviewService) -> None:
    app.state.overview_service = service
    app.state.configuration = service.configuration


def create_app(
    settings: Optional[Settings] = None,
    overview_service: Optional[OverviewService] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Without an ``overview_service`` the configuration file is read once at
    startup, and a ConfigurationError aborts startup.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(json_output=settings.log_json)
        logger.info("api_starting")

        if not hasattr(app.state, "overview_service"):
            configuration = load_configuration(settings.config_file)
            _install(app, OverviewService.from_settings(configuration, settings))

        yield

        logger.info("api_shutdown")

    app = FastAPI(
        title="Web Service Version Overview",
        description="Version and build time of every web service in every environment",
        version="0.1.0",
        lifespan=lifespan,
    )
    if overview_service is not None:
        _install(app, overview_service)

    # Register routes
    from service_overview.api.routes import health, overview

    app.include_router(health.router, tags=["health"])
    app.include_router(overview.page_router, tags=["overview"])
    app.include_router(overview.router, prefix="/api/v1", tags=["overview"])

    return app
