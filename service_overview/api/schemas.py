"""Response schemas for the API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class EnvironmentColumn(BaseModel):
    name: str
    base_url: str


class CellSummary(BaseModel):
    environment: str
    text: Optional[str] = None
    title: Optional[str] = None
    is_error: Optional[bool] = None


class RowSummary(BaseModel):
    name: str
    even: bool
    cells: list[CellSummary] = Field(default_factory=list)


class OverviewResponse(BaseModel):
    environments: list[EnvironmentColumn]
    rows: list[RowSummary]


class HealthResponse(BaseModel):
    status: str = "ok"
    environments: int = 0
    web_services: int = 0
