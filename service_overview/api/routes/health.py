"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from service_overview.api.dependencies import get_configuration
from service_overview.api.schemas import HealthResponse
from service_overview.core.models import Configuration

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    configuration: Configuration = Depends(get_configuration),
) -> HealthResponse:
    return HealthResponse(
        status="ok",
        environments=len(configuration.environments),
        web_services=len(configuration.web_services),
    )
