"""Web Service Version Overview — Main entry point.

    python main.py render [CONFIG] [OUTPUT]   write one HTML overview
    python main.py serve                      run the API with uvicorn
"""

from __future__ import annotations

import asyncio
import sys
import time

from service_overview.core.config import get_settings
from service_overview.core.configuration import ConfigurationError, load_configuration
from service_overview.core.logging import configure_logging, get_logger
from service_overview.overview.service import OverviewService
from service_overview.reports.renderer import write_overview

USAGE = "Usage: main.py render [CONFIG] [OUTPUT] | main.py serve"


async def render(config_file: str, output: str | None = None) -> int:
    """Fetch every service once and write the HTML overview."""
    logger = get_logger("main")
    settings = get_settings()

    try:
        configuration = load_configuration(config_file)
    except ConfigurationError as e:
        logger.error("configuration_invalid", error=str(e))
        return 1

    service = OverviewService.from_settings(configuration, settings)

    start_time = time.monotonic()
    overview = await service.collect()
    logger.info(
        "overview_collected",
        rows=len(overview.rows),
        columns=len(overview.environments),
        duration_seconds=f"{time.monotonic() - start_time:.1f}",
    )

    if output:
        with open(output, "w", encoding="utf-8") as f:
            write_overview(overview, f)
        logger.info("overview_written", path=output)
    else:
        write_overview(overview, sys.stdout)
    return 0


def serve() -> None:
    """Run the overview API with uvicorn."""
    import uvicorn

    from service_overview.api.app import create_app

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.api_host, port=settings.api_port)


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    configure_logging(json_output=settings.log_json)

    command = sys.argv[1] if len(sys.argv) > 1 else "render"

    if command == "serve":
        serve()
        return

    if command != "render":
        print(f"Unknown command: {command}")
        print(USAGE)
        sys.exit(2)

    config_file = sys.argv[2] if len(sys.argv) > 2 else settings.config_file
    output = sys.argv[3] if len(sys.argv) > 3 else None
    sys.exit(asyncio.run(render(config_file, output)))


if __name__ == "__main__":
    main()
