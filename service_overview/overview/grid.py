"""The service × environment grid.

The status of the n-th web service deployed in the m-th environment is found
at ``overview.rows[n].cells[m]``. Cells are allocated up front by
``build_overview``; during a dispatch each fetch task owns exactly one of
them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from service_overview.core.models import (
    BuildStatus,
    Configuration,
    Environment,
    WebServiceDefinition,
)
from service_overview.overview.errors import StatusFetchError
from service_overview.overview.urls import UrlAssembler


class ContentAlreadySet(Exception):
    """A cell's content is write-once."""


@dataclass(frozen=True)
class CellContent:
    text: str
    title: str
    is_error: bool


@dataclass
class ServiceInstance:
    """One web service deployed to one environment."""

    definition: WebServiceDefinition
    environment: Environment
    url_assembler: UrlAssembler
    status: Optional[BuildStatus] = None
    status_error: Optional[StatusFetchError] = None

    @property
    def key(self) -> str:
        return f"{self.environment.name}_{self.definition.name}"

    def info_endpoint(self) -> str:
        return self.url_assembler.info_endpoint(self.environment, self.definition)


@dataclass
class Cell:
    instance: ServiceInstance
    _content: Optional[CellContent] = field(default=None, init=False, repr=False)

    @property
    def content(self) -> Optional[CellContent]:
        return self._content

    @property
    def resolved(self) -> bool:
        return self._content is not None

    def resolve(self, content: CellContent) -> None:
        if self._content is not None:
            raise ContentAlreadySet(f"Cell {self.instance.key} already has content")
        self._content = content


@dataclass
class Row:
    name: str
    even: bool
    cells: list[Cell] = field(default_factory=list)


@dataclass
class Overview:
    # columns of the grid
    environments: tuple[Environment, ...]
    # rows of the grid
    web_services: tuple[WebServiceDefinition, ...]
    rows: list[Row] = field(default_factory=list)

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.web_services), len(self.environments)

    def cells(self) -> Iterator[Cell]:
        """All cells, row by row."""
        for row in self.rows:
            yield from row.cells

    @property
    def is_complete(self) -> bool:
        return all(cell.resolved for cell in self.cells())


def build_overview(
    configuration: Configuration, url_assembler: UrlAssembler
) -> Overview:
    """Expand the configuration into an unfetched grid.

    One row per web service, one column per environment, both in
    configuration order. Zero services or environments give an empty grid.
    """
    rows = []
    for index, definition in enumerate(configuration.web_services):
        row = Row(name=definition.name, even=index % 2 == 0)
        for environment in configuration.environments:
            instance = ServiceInstance(
                definition=definition,
                environment=environment,
                url_assembler=url_assembler,
            )
            row.cells.append(Cell(instance=instance))
        rows.append(row)

    return Overview(
        environments=tuple(configuration.environments),
        web_services=tuple(configuration.web_services),
        rows=rows,
    )
