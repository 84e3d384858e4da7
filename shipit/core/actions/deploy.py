"""Deploy action: push packaged services to their provisioned hosts."""

from pathlib import Path
from typing import List, Optional, Union

from ...environment import Environment
from ...exceptions import DeployError
from ...project import Project
from ...targets import ServiceTarget, artifact_dir, service_env_key
from ...themed_console import ThemedConsole
from ..context import RunContext
from ..options import DeployFlags
from ..reporter import NullReporter, Reporter
from .base import ActionResult, BaseAction

SERVICE_FLAG_WARNING = "WARNING: The '--service' flag is deprecated and will be removed in a future release."


class DeployAction(BaseAction):
    """Deploy every service, or the single service named in args."""

    def __init__(
        self,
        project: Project,
        env: Environment,
        target: ServiceTarget,
        console: ThemedConsole,
        reporter: Union[Reporter, NullReporter],
        flags: Optional[DeployFlags] = None,
        args: Optional[List[str]] = None,
    ):
        self.project = project
        self.env = env
        self.target = target
        self.console = console
        self.reporter = reporter
        self.flags = flags or DeployFlags()
        self.args = list(args or [])

    def _target_service(self) -> Optional[str]:
        if self.flags.service_name:
            print(self.console.warning_format(SERVICE_FLAG_WARNING), file=self.console.handles().stderr)
            if self.args and self.args[0] != self.flags.service_name:
                raise DeployError(
                    f"Conflicting services: --service '{self.flags.service_name}' "
                    f"and argument '{self.args[0]}'"
                )
            return self.flags.service_name
        return self.args[0] if self.args else None

    def _artifact(self, service_name: str) -> Path:
        if self.flags.from_package:
            return Path(self.flags.from_package)

        packaged = self.env.get(service_env_key(service_name, "PACKAGE"))
        if packaged and Path(packaged).exists():
            return Path(packaged)

        service = self.project.services[service_name]
        with self.reporter.step(f"Packaging service {service_name}"):
            return self.target.package(service, artifact_dir(self.project, self.env))

    def run(self, ctx: RunContext) -> ActionResult:
        services = self.project.select_services(self._target_service())
        if self.flags.from_package and len(services) > 1:
            raise DeployError("--from-package deploys a single artifact; name the service to deploy it to")
        if not services:
            self.reporter.info("No services to deploy")
            return ActionResult(data={"services": {}})

        endpoints = {}
        for service in services:
            ctx.raise_if_cancelled()
            artifact = self._artifact(service.name)
            with self.reporter.step(f"Deploying service {service.name}"):
                endpoints[service.name] = self.target.deploy(service, self.env, artifact)
            self.reporter.success(f"✓ Deployed {service.name}")

        self.env.save()
        lines = [f"  - {name}: {endpoint}" for name, endpoint in endpoints.items()]
        return ActionResult(
            message="Deployed endpoints:\n" + "\n".join(lines),
            data={"services": endpoints},
        )
