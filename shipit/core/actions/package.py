"""Package action: build deployable artifacts for project services."""

from typing import List, Optional, Union

from ...environment import Environment
from ...project import Project
from ...targets import ServiceTarget, artifact_dir, service_env_key
from ..context import RunContext
from ..options import PackageFlags
from ..reporter import NullReporter, Reporter
from .base import ActionResult, BaseAction


class PackageAction(BaseAction):
    """Package every service, or the one named in args."""

    def __init__(
        self,
        project: Project,
        env: Environment,
        target: ServiceTarget,
        reporter: Union[Reporter, NullReporter],
        flags: Optional[PackageFlags] = None,
        args: Optional[List[str]] = None,
    ):
        self.project = project
        self.env = env
        self.target = target
        self.reporter = reporter
        self.flags = flags or PackageFlags()
        self.args = list(args or [])

    def run(self, ctx: RunContext) -> ActionResult:
        services = self.project.select_services(self.args[0] if self.args else None)
        if not services:
            self.reporter.info("No services to package")
            return ActionResult(data={"artifacts": {}})

        output_dir = artifact_dir(self.project, self.env, self.flags.output_path)
        artifacts = {}
        for service in services:
            ctx.raise_if_cancelled()
            with self.reporter.step(f"Packaging service {service.name}"):
                artifact = self.target.package(service, output_dir)
            artifacts[service.name] = str(artifact)
            self.env.set(service_env_key(service.name, "PACKAGE"), str(artifact))
            self.reporter.success(f"✓ Packaged {service.name}: {artifact}")

        self.env.save()
        return ActionResult(
            message=f"Packaged {len(artifacts)} service(s) to {output_dir}",
            data={"artifacts": artifacts},
        )
