"""Flag groups shared between standalone and composed commands.

Every command owns a flags class. The environment selector is a common flag:
one ``EnvFlag`` holder is created per invocation and every flag group that
needs it keeps a reference to that same holder, so a value bound anywhere is
visible everywhere.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional

import click


@dataclass
class GlobalOptions:
    """Options accepted by the root command group."""

    cwd: Optional[str] = None
    no_prompt: bool = False
    debug: bool = False


class FlagOption:
    """A click option with a stable parameter name.

    The name lets composed commands drop options declared by more than one
    flag group.
    """

    def __init__(self, name: str, *param_decls: str, **attrs: Any):
        self.name = name
        self.param_decls = param_decls
        self.attrs = attrs

    def __call__(self, f: Callable) -> Callable:
        return click.option(*self.param_decls, self.name, **self.attrs)(f)

    def __repr__(self) -> str:
        return f"FlagOption({self.name!r})"


def merge_options(*groups: Iterable[FlagOption]) -> List[FlagOption]:
    """Union of option groups, keeping the first declaration of each name."""
    merged: List[FlagOption] = []
    seen = set()
    for group in groups:
        for option in group:
            if option.name in seen:
                continue
            seen.add(option.name)
            merged.append(option)
    return merged


def apply_options(options: Iterable[FlagOption]) -> Callable[[Callable], Callable]:
    """Decorate a click command with options, preserving declaration order in --help."""
    options = list(options)

    def decorator(f: Callable) -> Callable:
        for option in reversed(options):
            f = option(f)
        return f
    return decorator


class EnvFlag:
    """Holder for the target environment name."""

    def __init__(self, environment_name: Optional[str] = None):
        self.environment_name = environment_name

    @staticmethod
    def options() -> List[FlagOption]:
        return [
            FlagOption(
                "environment", "-e", "--environment",
                default=None,
                help="The name of the environment to use.",
            ),
        ]

    def bind(self, params: Mapping[str, Any], global_opts: Optional[GlobalOptions] = None) -> None:
        """Update the value in place; the holder itself is never replaced."""
        if "environment" in params:
            self.environment_name = params["environment"] or None


class CommandFlags:
    """Base for per-command flag groups."""

    def __init__(self):
        self.env = EnvFlag()
        self.global_opts = GlobalOptions()

    @staticmethod
    def non_common_options() -> List[FlagOption]:
        return []

    @classmethod
    def common_options(cls) -> List[FlagOption]:
        return EnvFlag.options()

    @classmethod
    def options(cls) -> List[FlagOption]:
        return merge_options(cls.common_options(), cls.non_common_options())

    def bind_non_common(self, params: Mapping[str, Any], global_opts: GlobalOptions) -> None:
        self.global_opts = global_opts

    def set_common(self, env_flag: EnvFlag) -> None:
        """Point this group at the shared environment holder."""
        self.env = env_flag

    def bind(self, params: Mapping[str, Any], global_opts: GlobalOptions) -> None:
        """Bind for standalone use of the command."""
        self.env.bind(params, global_opts)
        self.bind_non_common(params, global_opts)
        self.set_common(self.env)

    @property
    def environment_name(self) -> Optional[str]:
        return self.env.environment_name


class PackageFlags(CommandFlags):
    def __init__(self):
        super().__init__()
        self.output_path: Optional[str] = None

    @staticmethod
    def non_common_options() -> List[FlagOption]:
        return [
            FlagOption(
                "output_path", "--output-path",
                default=None,
                help="Directory to write packaged artifacts to.",
            ),
        ]

    def bind_non_common(self, params: Mapping[str, Any], global_opts: GlobalOptions) -> None:
        super().bind_non_common(params, global_opts)
        self.output_path = params.get("output_path")


class ProvisionFlags(CommandFlags):
    def __init__(self):
        super().__init__()
        self.preview = False
        self.no_progress = False

    @staticmethod
    def non_common_options() -> List[FlagOption]:
        return [
            FlagOption(
                "preview", "--preview",
                is_flag=True, default=False,
                help="Preview the changes without provisioning anything.",
            ),
            FlagOption(
                "no_progress", "--no-progress",
                is_flag=True, default=False, hidden=True,
                help="Deprecated. Has no effect.",
            ),
        ]

    def bind_non_common(self, params: Mapping[str, Any], global_opts: GlobalOptions) -> None:
        super().bind_non_common(params, global_opts)
        self.preview = bool(params.get("preview", False))
        self.no_progress = bool(params.get("no_progress", False))


class DeployFlags(CommandFlags):
    def __init__(self):
        super().__init__()
        self.from_package: Optional[str] = None
        self.service_name = ""

    @staticmethod
    def non_common_options() -> List[FlagOption]:
        return [
            FlagOption(
                "from_package", "--from-package",
                default=None,
                help="Deploy an existing artifact instead of packaging again.",
            ),
            FlagOption(
                "service_name", "--service",
                default="",
                help="Deprecated. Pass the service name as an argument instead.",
            ),
        ]

    def bind_non_common(self, params: Mapping[str, Any], global_opts: GlobalOptions) -> None:
        super().bind_non_common(params, global_opts)
        self.from_package = params.get("from_package")
        self.service_name = params.get("service_name") or ""


class UpFlags:
    """Flags of the composed ``up`` command.

    Embeds the provision and deploy groups and owns the single environment
    holder they share. Options that would leave the chain half done, such as
    provision's --preview followed by a real deploy, are not exposed.
    """

    SUPPRESSED_OPTIONS = frozenset({"preview"})

    def __init__(self):
        self.env = EnvFlag()
        self.global_opts = GlobalOptions()
        self.provision = ProvisionFlags()
        self.deploy = DeployFlags()

    @classmethod
    def options(cls) -> List[FlagOption]:
        merged = merge_options(
            EnvFlag.options(),
            ProvisionFlags.non_common_options(),
            DeployFlags.non_common_options(),
        )
        return [option for option in merged if option.name not in cls.SUPPRESSED_OPTIONS]

    def bind(self, params: Mapping[str, Any], global_opts: GlobalOptions) -> None:
        params = {k: v for k, v in params.items() if k not in self.SUPPRESSED_OPTIONS}
        self.env.bind(params, global_opts)
        self.global_opts = global_opts

        # non-common first so nothing shadows the shared holder afterwards
        self.provision.bind_non_common(params, global_opts)
        self.provision.set_common(self.env)
        self.deploy.bind_non_common(params, global_opts)
        self.deploy.set_common(self.env)

    @property
    def environment_name(self) -> Optional[str]:
        return self.env.environment_name


def new_flags(flags_cls: Callable[[], Any], params: Mapping[str, Any], global_opts: GlobalOptions):
    flags = flags_cls()
    flags.bind(params, global_opts)
    return flags
