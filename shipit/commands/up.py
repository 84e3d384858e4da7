"""Up command: package, provision and deploy in a single step."""

import click

from ..core.options import UpFlags, apply_options, new_flags
from ..registry import build_container
from ..utils import handle_errors
from .common import dispatch, global_options


@click.command("up")
@apply_options(UpFlags.options())
@handle_errors
def up_command(**params):
    """\b
    Executes the 'shipit package', 'shipit provision' and 'shipit deploy'
    commands in a single step.
    \b
    Accepts the flags of 'provision' and 'deploy'.
    \b
    Examples:
      shipit up                      # Use the default environment
      shipit up -e staging           # Use the 'staging' environment
    """
    gopts = global_options()
    flags = new_flags(UpFlags, params, gopts)

    container = build_container(gopts, flags.env)
    container.register_instance("up_flags", flags)
    dispatch(container, "up", "up_action")
