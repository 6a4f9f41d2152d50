"""Single info endpoint fetch, classified into the StatusFetchError taxonomy."""

from __future__ import annotations

import asyncio

import httpx
from pydantic import ValidationError

from service_overview.core.models import BuildStatus, InfoResponse
from service_overview.overview.errors import (
    EndpointDefinitionError,
    FetchTimeout,
    HttpStatusError,
    StatusDecodeError,
    TransportFailure,
)


async def fetch_status(
    client: httpx.AsyncClient, url: str, timeout: float
) -> BuildStatus:
    """GET ``url`` and decode its build info.

    Raises a StatusFetchError subclass for every way the fetch can fail.
    ``timeout`` bounds this whole request, body included, and is also handed
    to httpx as its per-phase timeout.
    """
    try:
        request = client.build_request("GET", url, timeout=timeout)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise EndpointDefinitionError(f"{url!r}: {e}") from e

    try:
        response = await asyncio.wait_for(client.send(request), timeout)
    except (httpx.TimeoutException, asyncio.TimeoutError) as e:
        raise FetchTimeout(f"no response from {url} within {timeout}s") from e
    except (httpx.UnsupportedProtocol, httpx.InvalidURL) as e:
        raise EndpointDefinitionError(f"{url!r}: {e}") from e
    except httpx.HTTPError as e:
        raise TransportFailure(f"{url}: {e}") from e

    if response.status_code != 200:
        raise HttpStatusError(response.status_code)

    try:
        return InfoResponse.model_validate_json(response.content).build
    except ValidationError as e:
        raise StatusDecodeError(
            f"{url} returned {e.error_count()} invalid field(s)"
        ) from e
