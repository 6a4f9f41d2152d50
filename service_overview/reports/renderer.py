"""Overview renderer — Jinja2-based HTML table plus a JSON-ready dict.

Both take the finished Overview as an explicit argument; nothing about a
render is kept between calls.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TextIO

from jinja2 import Environment, FileSystemLoader, select_autoescape

from service_overview.overview.grid import Overview

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _stripe(even: bool) -> str:
    """CSS class for alternating row shading."""
    return "A" if even else "B"


def _get_jinja_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["stripe"] = _stripe
    return env


def render_overview_html(overview: Overview, title: str = "Results") -> str:
    """Render the completed overview as an HTML table."""
    template = _get_jinja_env().get_template("overview.html.j2")
    return template.render(
        title=title,
        environments=overview.environments,
        rows=overview.rows,
    )


def write_overview(overview: Overview, stream: TextIO) -> None:
    stream.write(render_overview_html(overview))


def overview_to_dict(overview: Overview) -> dict[str, Any]:
    """JSON-serialisable view of the overview, in configuration order."""
    return {
        "environments": [
            {"name": env.name, "base_url": env.base_url}
            for env in overview.environments
        ],
        "rows": [
            {
                "name": row.name,
                "even": row.even,
                "cells": [
                    {
                        "environment": cell.instance.environment.name,
                        "text": cell.content.text if cell.content else None,
                        "title": cell.content.title if cell.content else None,
                        "is_error": cell.content.is_error if cell.content else None,
                    }
                    for cell in row.cells
                ],
            }
            for row in overview.rows
        ],
    }
