"""Wiring of shipit's dependencies into a container."""

import os
from pathlib import Path
from typing import Optional

from .account import AccountManager
from .config import ConfigManager
from .core.actions import DeployAction, PackageAction, ProvisionAction, UpAction
from .core.container import Container
from .core.middleware import MiddlewareRunner, SpanRecorder, TelemetryMiddleware, debug_middleware
from .core.options import DeployFlags, EnvFlag, GlobalOptions, PackageFlags, ProvisionFlags
from .core.reporter import Reporter
from .environment import EnvironmentManager
from .project import Project
from .targets import LocalProvider, ServiceTarget
from .themed_console import ThemedConsole


def _child_flags(flags_cls):
    def factory(c: Container):
        flags = flags_cls()
        flags.global_opts = c.resolve("global_options")
        flags.set_common(c.resolve("env_flag"))
        return flags
    return factory


def _runner(c: Container) -> MiddlewareRunner:
    return MiddlewareRunner([
        TelemetryMiddleware(c.resolve("span_recorder")),
        debug_middleware,
    ])


def build_container(
    global_opts: Optional[GlobalOptions] = None,
    env_flag: Optional[EnvFlag] = None,
    console: Optional[ThemedConsole] = None,
) -> Container:
    """Register everything a command needs.

    Commands override ``*_flags``, ``args`` and ``up_flags`` with the values
    they bound from the command line before resolving an action.
    """
    global_opts = global_opts or GlobalOptions()
    c = Container()

    c.register_instance("global_options", global_opts)
    c.register_instance("env_flag", env_flag or EnvFlag())
    c.register_instance("args", [])

    c.register_singleton("config", lambda c: ConfigManager())
    c.register_singleton("console", lambda c: console or ThemedConsole(theme_name=c.resolve("config").theme))
    c.register_singleton("reporter", lambda c: Reporter(c.resolve("console")))
    c.register_singleton("account_manager", lambda c: AccountManager(c.resolve("config")))
    c.register_singleton("project_root", lambda c: Path(global_opts.cwd or os.getcwd()))
    c.register_singleton("project", lambda c: Project.load(c.resolve("project_root")))
    c.register_singleton("environment_manager", lambda c: EnvironmentManager(c.resolve("project_root")))
    c.register_singleton(
        "environment",
        lambda c: c.resolve("environment_manager").resolve(c.resolve("env_flag").environment_name),
    )
    c.register_singleton("service_target", lambda c: ServiceTarget())
    c.register_singleton("provider", lambda c: LocalProvider())
    c.register_singleton("span_recorder", lambda c: SpanRecorder())
    c.register_singleton("runner", _runner)

    c.register_transient("package_flags", _child_flags(PackageFlags))
    c.register_transient("provision_flags", _child_flags(ProvisionFlags))
    c.register_transient("deploy_flags", _child_flags(DeployFlags))

    c.register_transient("package_action", lambda c: PackageAction(
        project=c.resolve("project"),
        env=c.resolve("environment"),
        target=c.resolve("service_target"),
        reporter=c.resolve("reporter"),
        flags=c.resolve("package_flags"),
        args=c.resolve("args"),
    ))
    c.register_transient("provision_action", lambda c: ProvisionAction(
        project=c.resolve("project"),
        env=c.resolve("environment"),
        provider=c.resolve("provider"),
        account_manager=c.resolve("account_manager"),
        console=c.resolve("console"),
        reporter=c.resolve("reporter"),
        flags=c.resolve("provision_flags"),
    ))
    c.register_transient("deploy_action", lambda c: DeployAction(
        project=c.resolve("project"),
        env=c.resolve("environment"),
        target=c.resolve("service_target"),
        console=c.resolve("console"),
        reporter=c.resolve("reporter"),
        flags=c.resolve("deploy_flags"),
        args=c.resolve("args"),
    ))
    c.register_transient("up_action", lambda c: UpAction(
        flags=c.resolve("up_flags"),
        env=c.resolve("environment"),
        account_manager=c.resolve("account_manager"),
        package_initializer=c.initializer("package_action"),
        provision_initializer=c.initializer("provision_action"),
        deploy_initializer=c.initializer("deploy_action"),
        console=c.resolve("console"),
        runner=c.resolve("runner"),
    ))
    return c
