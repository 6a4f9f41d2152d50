"""Per-cell fetch failures.

These never leave the dispatcher: each one ends up as error content on the
single cell whose fetch raised it.
"""

from __future__ import annotations

HTTP_STATUS_ERROR_PREFIX = "API responded with "


class StatusFetchError(Exception):
    """Base class for anything that prevents a cell from getting a BuildStatus."""

    kind = "fetch"


class TransportFailure(StatusFetchError):
    kind = "transport"


class FetchTimeout(StatusFetchError):
    kind = "timeout"


class HttpStatusError(StatusFetchError):
    kind = "status"

    def __init__(self, status_code: int) -> None:
        super().__init__(f"{HTTP_STATUS_ERROR_PREFIX}{status_code}")
        self.status_code = status_code


class StatusDecodeError(StatusFetchError):
    kind = "decode"


class EndpointDefinitionError(StatusFetchError):
    """The resolved endpoint URL could not be turned into a request."""

    kind = "configuration"
