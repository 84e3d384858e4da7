"""Main CLI entry point."""

from typing import Optional

import click

from . import __version__
from .commands.config import config_command
from .commands.deploy import deploy_command
from .commands.env import env_command
from .commands.package import package_command
from .commands.provision import provision_command
from .commands.up import up_command
from .core.options import GlobalOptions
from .utils import configure_logging


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="shipit")
@click.option("--cwd", "-C", type=click.Path(file_okay=False), help="Run as if started in this directory.")
@click.option("--no-prompt", is_flag=True, help="Fail instead of prompting for missing values.")
@click.option("--debug", is_flag=True, envvar="SHIPIT_DEBUG", help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, cwd: Optional[str], no_prompt: bool, debug: bool):
    """shipit - package, provision and deploy your project."""
    configure_logging(debug)
    ctx.obj = GlobalOptions(cwd=cwd, no_prompt=no_prompt, debug=debug)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(package_command)
cli.add_command(provision_command)
cli.add_command(deploy_command)
cli.add_command(up_command)
cli.add_command(env_command)
cli.add_command(config_command)


def main():
    cli()


if __name__ == "__main__":
    main()
