"""Loading the environment × web service configuration from a JSON file."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from service_overview.core.logging import get_logger
from service_overview.core.models import Configuration

logger = get_logger("configuration")


class ConfigurationError(Exception):
    """The configuration cannot produce an overview grid. Fatal at startup."""


def parse_configuration(data: object) -> Configuration:
    try:
        return Configuration.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_configuration(path: str | Path) -> Configuration:
    """Read and validate the configuration file at ``path``.

    Raises ConfigurationError if the file is missing, not JSON, or does not
    describe environments and web services.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Could not read config {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Config {path} is not valid JSON: {e}") from e

    configuration = parse_configuration(data)
    logger.info(
        "configuration_loaded",
        path=str(path),
        environments=len(configuration.environments),
        web_services=len(configuration.web_services),
    )
    return configuration
