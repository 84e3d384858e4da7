"""User configuration commands."""

import click

from ..config import ConfigManager
from ..utils import console, handle_errors


@click.group("config")
def config_command():
    """Manage user configuration (~/.shipit/config.ini)."""


@config_command.command("get")
@click.argument("key")
@handle_errors
def config_get_command(key: str):
    """Show the value of KEY (e.g. defaults.location)."""
    value = ConfigManager().get(key)
    if value is None:
        console.warning(f"Key '{key}' not found")
        return
    console.print(value, markup=False, highlight=False)


@config_command.command("set")
@click.argument("key")
@click.argument("value")
@handle_errors
def config_set_command(key: str, value: str):
    """Set KEY to VALUE."""
    ConfigManager().set(key, value)
    console.success(f"✓ {key} = {value}")


@config_command.command("unset")
@click.argument("key")
@handle_errors
def config_unset_command(key: str):
    """Remove KEY."""
    if ConfigManager().unset(key):
        console.success(f"✓ Removed {key}")
    else:
        console.warning(f"Key '{key}' not found")


@config_command.command("show")
@handle_errors
def config_show_command():
    """Show the entire configuration."""
    config = ConfigManager()
    sections = config.get_all()
    console.dim(f"# {config.get_config_path()}")
    for section, values in sections.items():
        console.print(f"[bold]\\[{section}][/bold]")
        for key, value in values.items():
            console.print(f"{key} = {value}", markup=False, highlight=False)
