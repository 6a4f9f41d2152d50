"""Version overview endpoints — HTML table and JSON.

Every request builds a fresh grid and fetches all info endpoints again.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from service_overview.api.dependencies import get_overview_service
from service_overview.api.schemas import OverviewResponse
from service_overview.overview.service import OverviewService
from service_overview.reports.renderer import overview_to_dict, render_overview_html

page_router = APIRouter()
router = APIRouter()


@page_router.get("/", response_class=HTMLResponse)
async def overview_page(
    service: OverviewService = Depends(get_overview_service),
) -> HTMLResponse:
    overview = await service.collect()
    return HTMLResponse(content=render_overview_html(overview))


@router.get("/overview", response_model=OverviewResponse)
async def overview_json(
    service: OverviewService = Depends(get_overview_service),
) -> OverviewResponse:
    overview = await service.collect()
    return OverviewResponse.model_validate(overview_to_dict(overview))
