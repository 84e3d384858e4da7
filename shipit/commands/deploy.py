"""Deploy command."""

from typing import Optional

import click

from ..core.options import DeployFlags, apply_options, new_flags
from ..registry import build_container
from ..utils import handle_errors
from .common import dispatch, global_options


@click.command("deploy")
@click.argument("service", required=False)
@apply_options(DeployFlags.options())
@handle_errors
def deploy_command(service: Optional[str], **params):
    """\b
    Deploy the project's services to the provisioned environment.
    \b
    SERVICE: Only deploy this service. Deploys all services if omitted.
    \b
    Examples:
      shipit deploy                            # Deploy every service
      shipit deploy api                        # Deploy only 'api'
      shipit deploy api --from-package a.zip   # Deploy a prebuilt artifact
    """
    gopts = global_options()
    flags = new_flags(DeployFlags, params, gopts)
    args = [service] if service else []

    container = build_container(gopts, flags.env)
    container.register_instance("deploy_flags", flags)
    container.register_instance("args", args)
    dispatch(container, "deploy", "deploy_action", args)
