"""Pydantic models for the overview configuration and the info endpoint payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ── Configuration ────────────────────────────────────────────────


class Environment(BaseModel):
    """A named deployment target, e.g. staging or production."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name")
    base_url: str = Field(alias="BaseUrl")


class WebServiceDefinition(BaseModel):
    """A web service plus the path fragment selecting it behind an environment."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name")
    path_selector: str = Field(alias="PathSelector")


class Configuration(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    environments: tuple[Environment, ...] = Field(default=(), alias="Environments")
    web_services: tuple[WebServiceDefinition, ...] = Field(default=(), alias="WebServices")


# ── Info endpoint payload ────────────────────────────────────────


class BuildStatus(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str
    build_time: str = Field(alias="buildTime")


class InfoResponse(BaseModel):
    """Body served by a service's info endpoint: ``{"build": {...}}``."""

    build: BuildStatus
