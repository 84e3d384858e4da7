"""Package command."""

from typing import Optional

import click

from ..core.options import PackageFlags, apply_options, new_flags
from ..registry import build_container
from ..utils import handle_errors
from .common import dispatch, global_options


@click.command("package")
@click.argument("service", required=False)
@apply_options(PackageFlags.options())
@handle_errors
def package_command(service: Optional[str], **params):
    """\b
    Package the project's services into deployable artifacts.
    \b
    SERVICE: Only package this service. Packages all services if omitted.
    \b
    Examples:
      shipit package                 # Package every service
      shipit package api             # Package only 'api'
      shipit package -e prod         # Use the 'prod' environment
    """
    gopts = global_options()
    flags = new_flags(PackageFlags, params, gopts)
    args = [service] if service else []

    container = build_container(gopts, flags.env)
    container.register_instance("package_flags", flags)
    container.register_instance("args", args)
    dispatch(container, "package", "package_action", args)
