"""Environment management commands."""

from pathlib import Path
from typing import Optional

import click
from rich.table import Table

from ..environment import LOCATION_KEY, SUBSCRIPTION_KEY, EnvironmentManager
from ..utils import console, handle_errors
from .common import global_options


def _manager() -> EnvironmentManager:
    gopts = global_options()
    return EnvironmentManager(Path(gopts.cwd or "."))


@click.group("env")
def env_command():
    """Manage environments."""


@env_command.command("new")
@click.argument("name")
@click.option("--subscription", help="Subscription ID to store on the environment")
@click.option("--location", "-l", help="Location to store on the environment")
@handle_errors
def env_new_command(name: str, subscription: Optional[str], location: Optional[str]):
    """Create a new environment NAME."""
    values = {}
    if subscription:
        values[SUBSCRIPTION_KEY] = subscription
    if location:
        values[LOCATION_KEY] = location

    manager = _manager()
    manager.create(name, values)
    console.success(f"✓ Environment '{name}' created")
    if manager.default_name() == name:
        console.dim(f"'{name}' is now the default environment")


@env_command.command("select")
@click.argument("name")
@handle_errors
def env_select_command(name: str):
    """Make NAME the default environment."""
    _manager().set_default(name)
    console.success(f"✓ Default environment set to '{name}'")


@env_command.command("list")
@handle_errors
def env_list_command():
    """List environments of the current project."""
    manager = _manager()
    names = manager.list()
    if not names:
        console.warning("No environments. Create one with 'shipit env new <name>'.")
        return

    default = manager.default_name()
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("NAME")
    table.add_column("DEFAULT")
    for name in names:
        table.add_row(name, "✓" if name == default else "")
    console.print(table)
