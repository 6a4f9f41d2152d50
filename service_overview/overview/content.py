"""Mapping fetch outcomes to display-ready cell content."""

from __future__ import annotations

from typing import Union

from service_overview.core.models import BuildStatus
from service_overview.overview.errors import (
    EndpointDefinitionError,
    FetchTimeout,
    HttpStatusError,
    StatusDecodeError,
    StatusFetchError,
    TransportFailure,
)
from service_overview.overview.grid import CellContent

ERROR_PLACEHOLDER = "??"

FetchOutcome = Union[BuildStatus, StatusFetchError]

_ERROR_LABELS: dict[type[StatusFetchError], str] = {
    TransportFailure: "Could not reach service",
    FetchTimeout: "Timed out",
    StatusDecodeError: "Unexpected info response",
    EndpointDefinitionError: "Invalid endpoint",
}


def describe_error(error: StatusFetchError) -> str:
    """Human readable tooltip for a failed fetch."""
    if isinstance(error, HttpStatusError):
        return str(error)
    label = _ERROR_LABELS.get(type(error), "Fetch failed")
    detail = str(error)
    return f"{label}: {detail}" if detail else label


def to_cell_content(outcome: FetchOutcome) -> CellContent:
    if isinstance(outcome, BuildStatus):
        return CellContent(
            text=outcome.version,
            title=outcome.build_time,
            is_error=False,
        )
    return CellContent(
        text=ERROR_PLACEHOLDER,
        title=describe_error(outcome),
        is_error=True,
    )
