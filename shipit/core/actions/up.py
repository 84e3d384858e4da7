"""Composite action that runs package, provision and deploy in one go."""

from ...account import AccountManager
from ...environment import Environment
from ...preconditions import ensure_subscription_and_location
from ...themed_console import ThemedConsole
from ..context import RunContext
from ..middleware import MiddlewareRunner, Options
from ..options import UpFlags
from .base import ActionInitializer, ActionResult, BaseAction
from .deploy import SERVICE_FLAG_WARNING
from .provision import NO_PROGRESS_WARNING


class UpAction(BaseAction):
    """Run package -> provision -> deploy, stopping at the first failure.

    Child actions are built lazily through their initializers, only once the
    previous step has succeeded, and each one runs through the shared
    middleware runner exactly as if the user had invoked it directly.
    """

    def __init__(
        self,
        flags: UpFlags,
        env: Environment,
        account_manager: AccountManager,
        package_initializer: ActionInitializer,
        provision_initializer: ActionInitializer,
        deploy_initializer: ActionInitializer,
        console: ThemedConsole,
        runner: MiddlewareRunner,
    ):
        self.flags = flags
        self.env = env
        self.account_manager = account_manager
        self.package_initializer = package_initializer
        self.provision_initializer = provision_initializer
        self.deploy_initializer = deploy_initializer
        self.console = console
        self.runner = runner

    def _warn(self, text: str) -> None:
        print(self.console.warning_format(text), file=self.console.handles().stderr)

    def run(self, ctx: RunContext) -> ActionResult:
        if self.flags.provision.no_progress:
            self._warn(NO_PROGRESS_WARNING)
            # provision ignores the flag; clearing it keeps it from warning a second time
            self.flags.provision.no_progress = False

        if self.flags.deploy.service_name:
            self._warn(SERVICE_FLAG_WARNING)

        ensure_subscription_and_location(
            ctx,
            self.console,
            self.env,
            self.account_manager,
            no_prompt=self.flags.global_opts.no_prompt,
        )

        package = self.package_initializer()
        self.runner.run_child_action(ctx, Options(command_path="package"), package)

        provision = self.provision_initializer()
        provision.flags = self.flags.provision
        self.runner.run_child_action(ctx, Options(command_path="provision"), provision)

        # separate provision output from deploy output
        self.console.message(ctx, "")

        deploy = self.deploy_initializer()
        deploy.flags = self.flags.deploy
        # pass the deprecated flag as an argument so deploy does not warn again
        if deploy.flags.service_name:
            deploy.args = [deploy.flags.service_name]
            deploy.flags.service_name = ""
        return self.runner.run_child_action(ctx, Options(command_path="deploy"), deploy)
