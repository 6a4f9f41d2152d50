"""Concurrent fetch of every cell in an overview.

One asyncio task per cell, all launched together and joined by a single
barrier. Each task writes only its own cell, so no locking is needed.
"""

from __future__ import annotations

import asyncio
import time
from typing import Optional

import httpx

from service_overview.core.logging import get_logger
from service_overview.overview.content import to_cell_content
from service_overview.overview.errors import (
    EndpointDefinitionError,
    FetchTimeout,
    StatusFetchError,
)
from service_overview.overview.fetcher import fetch_status
from service_overview.overview.grid import Cell, Overview

logger = get_logger("dispatcher")

DEFAULT_TIMEOUT_SECONDS = 2.0


async def update_cell(client: httpx.AsyncClient, cell: Cell, timeout: float) -> None:
    """Fetch the status of one cell's service instance and set its content."""
    instance = cell.instance
    url = None
    try:
        try:
            url = instance.info_endpoint()
        except Exception as e:
            logger.exception("info_endpoint_failed", key=instance.key)
            raise EndpointDefinitionError(
                f"could not assemble info endpoint for {instance.key}: {e}"
            ) from e
        status = await fetch_status(client, url, timeout)
    except StatusFetchError as e:
        _fail(cell, e)
        logger.warning(
            "status_fetch_failed",
            key=instance.key,
            url=url,
            kind=e.kind,
            error=str(e),
        )
        return

    instance.status = status
    logger.info("status_loaded", key=instance.key, version=status.version)
    cell.resolve(to_cell_content(status))


def _fail(cell: Cell, error: StatusFetchError) -> None:
    cell.instance.status_error = error
    cell.resolve(to_cell_content(error))


async def _fetch_all(
    client: httpx.AsyncClient,
    cells: list[Cell],
    timeout: float,
    deadline: Optional[float],
) -> None:
    tasks = {
        asyncio.create_task(update_cell(client, cell, timeout)): cell for cell in cells
    }

    done, pending = await asyncio.wait(tasks, timeout=deadline)

    if pending:
        for task in pending:
            task.cancel()
        await asyncio.wait(pending)
        for task in pending:
            cell = tasks[task]
            if not cell.resolved:
                _fail(cell, FetchTimeout(f"dispatch deadline of {deadline}s exceeded"))

    # A task that died on anything else still leaves its cell with content
    for task in done:
        exc = task.exception()
        if exc is None:
            continue
        cell = tasks[task]
        logger.error("cell_task_failed", key=cell.instance.key, exc_info=exc)
        if not cell.resolved:
            _fail(cell, StatusFetchError(f"unexpected error: {exc!r}"))


async def dispatch(
    overview: Overview,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    *,
    client: Optional[httpx.AsyncClient] = None,
    deadline: Optional[float] = None,
) -> Overview:
    """Fetch every cell of ``overview`` concurrently and fill in its content.

    Returns only once every cell holds terminal content. ``timeout`` bounds
    each request independently; the optional ``deadline`` bounds the whole
    dispatch, after which unfinished cells are reported as timed out.

    Args:
        overview: Grid produced by ``build_overview``; mutated in place.
        timeout: Per-request timeout in seconds.
        client: Shared client to use. When omitted one is opened and closed
            around the dispatch.
        deadline: Optional dispatch-wide limit in seconds.
    """
    cells = list(overview.cells())
    start = time.monotonic()

    if cells:
        if client is None:
            async with httpx.AsyncClient() as own_client:
                await _fetch_all(own_client, cells, timeout, deadline)
        else:
            await _fetch_all(client, cells, timeout, deadline)

    errors = sum(1 for cell in cells if cell.content.is_error)
    logger.info(
        "dispatch_complete",
        cells=len(cells),
        errors=errors,
        duration_seconds=f"{time.monotonic() - start:.2f}",
    )
    return overview
