"""Project definition loaded from shipit.ini."""

import configparser
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .exceptions import ConfigError, ServiceNotFoundError

PROJECT_FILE = "shipit.ini"
SERVICE_PREFIX = "service."


@dataclass
class ServiceConfig:
    """One deployable service of the project."""
    name: str
    path: Path
    host: str = "appservice"
    language: str = "python"


@dataclass
class Project:
    name: str
    root: Path
    services: Dict[str, ServiceConfig] = field(default_factory=dict)

    @classmethod
    def load(cls, root: Path) -> "Project":
        """Load ``shipit.ini`` from ``root``.

        Example file::

            [project]
            name = todo

            [service.api]
            path = src/api
            host = containerapp
        """
        root = Path(root)
        project_file = root / PROJECT_FILE
        if not project_file.is_file():
            raise ConfigError(f"No {PROJECT_FILE} found in {root}")

        parser = configparser.ConfigParser()
        try:
            parser.read(project_file)
        except configparser.Error as e:
            raise ConfigError(f"Invalid {PROJECT_FILE}: {e}") from e

        name = parser.get("project", "name", fallback=root.name)
        services = {}
        for section in parser.sections():
            if not section.startswith(SERVICE_PREFIX):
                continue
            service_name = section[len(SERVICE_PREFIX):]
            if not service_name:
                raise ConfigError(f"Empty service name in section [{section}]")
            services[service_name] = ServiceConfig(
                name=service_name,
                path=root / parser.get(section, "path", fallback=service_name),
                host=parser.get(section, "host", fallback="appservice"),
                language=parser.get(section, "language", fallback="python"),
            )

        return cls(name=name, root=root, services=services)

    def select_services(self, target: Optional[str] = None) -> List[ServiceConfig]:
        """All services in declaration order, or only ``target``."""
        if not target:
            return list(self.services.values())
        if target not in self.services:
            raise ServiceNotFoundError(
                f"Service '{target}' not found in {PROJECT_FILE}. "
                f"Known services: {', '.join(self.services) or 'none'}"
            )
        return [self.services[target]]
