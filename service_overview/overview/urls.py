"""Info endpoint URL strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from service_overview.core.models import Environment, WebServiceDefinition


class UrlAssembler(ABC):
    """Given an environment and a service definition, produce the info endpoint URL."""

    @abstractmethod
    def info_endpoint(
        self, environment: Environment, definition: WebServiceDefinition
    ) -> str:
        ...


@dataclass(frozen=True)
class SimpleUrlConstructor(UrlAssembler):
    """Builds ``base_url + mid_fix + path_selector + post_fix``."""

    mid_fix: str = "/"
    post_fix: str = "/actuator/info"

    def info_endpoint(
        self, environment: Environment, definition: WebServiceDefinition
    ) -> str:
        return environment.base_url + self.mid_fix + definition.path_selector + self.post_fix
