"""Unit tests for service_overview/reports/renderer.py."""

from __future__ import annotations

import io

from service_overview.core.models import Configuration, Environment, WebServiceDefinition
from service_overview.overview.grid import CellContent, build_overview
from service_overview.reports.renderer import (
    overview_to_dict,
    render_overview_html,
    write_overview,
)


def _filled_overview(configuration, url_assembler):
    overview = build_overview(configuration, url_assembler)
    for i, cell in enumerate(overview.cells()):
        if i == 1:
            cell.resolve(CellContent(text="??", title="API responded with 500", is_error=True))
        else:
            cell.resolve(CellContent(text=f"1.{i}", title=f"build-{i}", is_error=False))
    return overview


class TestRenderOverviewHtml:
    def test_header_links_environments(self, configuration, url_assembler):
        html = render_overview_html(_filled_overview(configuration, url_assembler))
        assert '<a href="http://alpha">Alpha</a>' in html
        assert '<a href="http://gamma">Gamma</a>' in html
        assert html.index("Alpha") < html.index("Beta") < html.index("Gamma")

    def test_rows_are_striped(self, configuration, url_assembler):
        html = render_overview_html(_filled_overview(configuration, url_assembler))
        assert '<tr class="A">' in html
        assert '<tr class="B">' in html
        assert html.index('<tr class="A">') < html.index("Orders") < html.index('<tr class="B">')

    def test_cells_render_text_and_title(self, configuration, url_assembler):
        html = render_overview_html(_filled_overview(configuration, url_assembler))
        assert '<td title="build-0">1.0</td>' in html
        assert '<td class="error" title="API responded with 500">??</td>' in html

    def test_no_environments(self, web_services, url_assembler):
        overview = build_overview(Configuration(web_services=web_services), url_assembler)
        html = render_overview_html(overview)
        assert "(No environments found)" in html
        assert "Orders" in html

    def test_escapes_configured_names(self, url_assembler):
        config = Configuration(
            environments=[Environment(name="<b>prod</b>", base_url="http://p")],
            web_services=[WebServiceDefinition(name="A&B", path_selector="ab")],
        )
        overview = build_overview(config, url_assembler)
        overview.rows[0].cells[0].resolve(
            CellContent(text="<script>", title='"quoted"', is_error=False)
        )
        html = render_overview_html(overview)
        assert "<b>prod</b>" not in html
        assert "&lt;b&gt;prod&lt;/b&gt;" in html
        assert "A&amp;B" in html
        assert "&lt;script&gt;" in html

    def test_custom_title(self, configuration, url_assembler):
        html = render_overview_html(_filled_overview(configuration, url_assembler), title="Versions")
        assert "<title>Versions</title>" in html


class TestWriteOverview:
    def test_writes_html_to_stream(self, configuration, url_assembler):
        stream = io.StringIO()
        write_overview(_filled_overview(configuration, url_assembler), stream)
        assert stream.getvalue().startswith("<!DOCTYPE html>")


class TestOverviewToDict:
    def test_structure(self, configuration, url_assembler):
        data = overview_to_dict(_filled_overview(configuration, url_assembler))
        assert [e["name"] for e in data["environments"]] == ["Alpha", "Beta", "Gamma"]
        assert [r["name"] for r in data["rows"]] == ["Orders", "Payments"]
        assert [r["even"] for r in data["rows"]] == [True, False]
        first_row = data["rows"][0]["cells"]
        assert first_row[0] == {
            "environment": "Alpha",
            "text": "1.0",
            "title": "build-0",
            "is_error": False,
        }
        assert first_row[1]["is_error"] is True

    def test_unfetched_cells_are_none(self, configuration, url_assembler):
        data = overview_to_dict(build_overview(configuration, url_assembler))
        assert data["rows"][0]["cells"][0]["text"] is None
