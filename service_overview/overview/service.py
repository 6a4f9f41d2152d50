"""OverviewService — builds a fresh grid and fetches it, once per rendering cycle."""

from __future__ import annotations

from typing import Optional

import httpx

from service_overview.core.config import Settings
from service_overview.core.models import Configuration
from service_overview.overview.dispatcher import DEFAULT_TIMEOUT_SECONDS, dispatch
from service_overview.overview.grid import Overview, build_overview
from service_overview.overview.urls import SimpleUrlConstructor, UrlAssembler


class OverviewService:
    """Collects completed overviews for a fixed configuration.

    Nothing is cached between calls to ``collect``: every call builds a new
    grid and fetches every cell again.
    """

    def __init__(
        self,
        configuration: Configuration,
        url_assembler: UrlAssembler,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        deadline: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.configuration = configuration
        self.url_assembler = url_assembler
        self.timeout = timeout
        self.deadline = deadline
        self._client = client

    @classmethod
    def from_settings(
        cls, configuration: Configuration, settings: Settings
    ) -> "OverviewService":
        return cls(
            configuration,
            SimpleUrlConstructor(
                mid_fix=settings.url_mid_fix,
                post_fix=settings.url_post_fix,
            ),
            timeout=settings.request_timeout_seconds,
            deadline=settings.dispatch_deadline_seconds,
        )

    def build(self) -> Overview:
        return build_overview(self.configuration, self.url_assembler)

    async def collect(self) -> Overview:
        overview = self.build()
        return await dispatch(
            overview,
            self.timeout,
            client=self._client,
            deadline=self.deadline,
        )
