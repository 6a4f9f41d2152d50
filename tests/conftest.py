"""Shared test fixtures for the overview test suite."""

from __future__ import annotations

import json

import httpx
import pytest

from service_overview.core.models import Configuration, Environment, WebServiceDefinition
from service_overview.overview.urls import SimpleUrlConstructor


def _info_body(version: str, build_time: str) -> dict:
    return {"build": {"version": version, "buildTime": build_time}}


# ── Sample configuration ────────────────────────────────────────


@pytest.fixture
def environments() -> list[Environment]:
    return [
        Environment(name="Alpha", base_url="http://alpha"),
        Environment(name="Beta", base_url="http://beta"),
        Environment(name="Gamma", base_url="http://gamma"),
    ]


@pytest.fixture
def web_services() -> list[WebServiceDefinition]:
    return [
        WebServiceDefinition(name="Orders", path_selector="orders"),
        WebServiceDefinition(name="Payments", path_selector="payments"),
    ]


@pytest.fixture
def configuration(environments, web_services) -> Configuration:
    return Configuration(environments=environments, web_services=web_services)


@pytest.fixture
def url_assembler() -> SimpleUrlConstructor:
    return SimpleUrlConstructor(mid_fix="/backend/", post_fix="/actuator/info")


# ── Stub info endpoints ─────────────────────────────────────────


@pytest.fixture
async def stub_client():
    """Factory for an AsyncClient backed by an in-process stub handler.

    ``responses`` maps a URL to either a dict (served as JSON with 200), a
    status code, an ``httpx.Response`` or an exception instance to raise.
    Unknown URLs answer with a healthy default body.
    """
    clients: list[httpx.AsyncClient] = []

    def factory(responses: dict | None = None) -> httpx.AsyncClient:
        responses = responses or {}

        def handler(request: httpx.Request) -> httpx.Response:
            answer = responses.get(str(request.url), _info_body("1.0.0", "2020-01-01T00:00:00Z"))
            if isinstance(answer, Exception):
                raise answer
            if isinstance(answer, httpx.Response):
                return answer
            if isinstance(answer, int):
                return httpx.Response(answer)
            return httpx.Response(200, content=json.dumps(answer).encode())

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        await client.aclose()
