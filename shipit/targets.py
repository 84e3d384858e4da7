"""Local stand-ins for the packaging, provisioning and hosting backends."""

import logging
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from .environment import Environment
from .exceptions import ConfigError, ProvisionError
from .project import Project, ServiceConfig

logger = logging.getLogger(__name__)


def service_env_key(service_name: str, suffix: str) -> str:
    return f"SERVICE_{service_name.upper().replace('-', '_')}_{suffix}"


class ServiceTarget:
    """Packages a service directory and records deployments on the environment."""

    def package(self, service: ServiceConfig, output_dir: Path) -> Path:
        if not service.path.is_dir():
            raise ConfigError(f"Service path does not exist: {service.path}")
        output_dir.mkdir(parents=True, exist_ok=True)
        archive = shutil.make_archive(str(output_dir / service.name), "zip", root_dir=service.path)
        logger.debug("packaged %s into %s", service.name, archive)
        return Path(archive)

    def deploy(self, service: ServiceConfig, env: Environment, artifact: Path) -> str:
        host = env.get(service_env_key(service.name, "HOST"))
        if not host:
            raise ProvisionError(
                f"Service '{service.name}' has no provisioned host. Run 'shipit provision' first."
            )
        endpoint = f"https://{host}"
        env.set(service_env_key(service.name, "ENDPOINT"), endpoint)
        env.set(service_env_key(service.name, "ARTIFACT"), str(artifact))
        return endpoint


class LocalProvider:
    """Provider that derives resource names from the environment."""

    def plan(self, project: Project, env: Environment) -> Dict[str, str]:
        location = env.location
        if not location:
            raise ProvisionError("Environment has no location")
        outputs = {"SHIPIT_RESOURCE_GROUP": f"rg-{env.name}"}
        for service in project.services.values():
            outputs[service_env_key(service.name, "HOST")] = (
                f"{service.name}-{env.name}.{location}.{service.host}.local"
            )
        return outputs

    def provision(self, project: Project, env: Environment) -> Dict[str, str]:
        outputs = self.plan(project, env)
        outputs["SHIPIT_PROVISIONED_AT"] = datetime.now(timezone.utc).isoformat()
        return outputs


def artifact_dir(project: Project, env: Environment, output_path: Optional[str] = None) -> Path:
    if output_path:
        return Path(output_path)
    return project.root / ".shipit" / env.name / "dist"
