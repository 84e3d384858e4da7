"""Provision command."""

import click

from ..core.options import ProvisionFlags, apply_options, new_flags
from ..registry import build_container
from ..utils import handle_errors
from .common import dispatch, global_options


@click.command("provision")
@apply_options(ProvisionFlags.options())
@handle_errors
def provision_command(**params):
    """\b
    Provision the infrastructure for an environment.
    \b
    Examples:
      shipit provision               # Provision the default environment
      shipit provision --preview     # Show what would change
    """
    gopts = global_options()
    flags = new_flags(ProvisionFlags, params, gopts)

    container = build_container(gopts, flags.env)
    container.register_instance("provision_flags", flags)
    dispatch(container, "provision", "provision_action")
