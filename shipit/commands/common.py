"""Helpers shared by the action-backed commands."""

from typing import Optional, Sequence

import click

from ..core.actions.base import ActionResult
from ..core.container import Container
from ..core.context import RunContext
from ..core.middleware import Options
from ..core.options import GlobalOptions


def global_options() -> GlobalOptions:
    """Options bound by the root group, or defaults when run without it."""
    ctx = click.get_current_context(silent=True)
    gopts = ctx.find_object(GlobalOptions) if ctx is not None else None
    return gopts or GlobalOptions()


def dispatch(
    container: Container,
    command_path: str,
    action_name: str,
    args: Optional[Sequence[str]] = None,
) -> ActionResult:
    """Build the named action and run it as a top-level command."""
    action = container.initializer(action_name)()
    options = Options(command_path=command_path, args=tuple(args or ()))
    result = container.resolve("runner").run_action(RunContext(), options, action)

    if result.message:
        container.resolve("console").success(result.message)
    return result
