"""Provision action: create the infrastructure for an environment."""

from typing import Optional, Union

from ...account import AccountManager
from ...environment import Environment
from ...preconditions import ensure_subscription_and_location
from ...project import Project
from ...targets import LocalProvider
from ...themed_console import ThemedConsole
from ..context import RunContext
from ..options import ProvisionFlags
from ..reporter import NullReporter, Reporter
from .base import ActionResult, BaseAction

NO_PROGRESS_WARNING = "WARNING: The '--no-progress' flag is deprecated and will be removed in a future release."


class ProvisionAction(BaseAction):
    """Provision resources and store the provider outputs on the environment."""

    def __init__(
        self,
        project: Project,
        env: Environment,
        provider: LocalProvider,
        account_manager: AccountManager,
        console: ThemedConsole,
        reporter: Union[Reporter, NullReporter],
        flags: Optional[ProvisionFlags] = None,
    ):
        self.project = project
        self.env = env
        self.provider = provider
        self.account_manager = account_manager
        self.console = console
        self.reporter = reporter
        self.flags = flags or ProvisionFlags()

    def run(self, ctx: RunContext) -> ActionResult:
        if self.flags.no_progress:
            print(self.console.warning_format(NO_PROGRESS_WARNING), file=self.console.handles().stderr)

        ensure_subscription_and_location(
            ctx,
            self.console,
            self.env,
            self.account_manager,
            no_prompt=self.flags.global_opts.no_prompt,
        )

        if self.flags.preview:
            with self.reporter.step("Computing provisioning preview"):
                planned = self.provider.plan(self.project, self.env)
            changes = {k: v for k, v in planned.items() if self.env.get(k) != v}
            return ActionResult(
                message=f"Preview: {len(changes)} value(s) would change",
                data={"outputs": changes, "preview": True},
            )

        with self.reporter.step(f"Provisioning environment {self.env.name}"):
            outputs = self.provider.provision(self.project, self.env)

        for key, value in outputs.items():
            self.env.set(key, value)
        self.env.save()

        return ActionResult(
            message=f"Provisioned environment {self.env.name}",
            data={"outputs": outputs},
        )
