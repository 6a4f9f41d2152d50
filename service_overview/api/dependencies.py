"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from service_overview.core.models import Configuration
from service_overview.overview.service import OverviewService


def get_configuration(request: Request) -> Configuration:
    return request.app.state.configuration


def get_overview_service(request: Request) -> OverviewService:
    return request.app.state.overview_service
