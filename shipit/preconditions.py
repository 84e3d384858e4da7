"""Checks that must pass before provisioning-dependent commands run."""

import logging
from typing import Optional

from rich.prompt import Prompt

from .account import AccountManager
from .core.context import RunContext
from .environment import LOCATION_KEY, SUBSCRIPTION_KEY, Environment
from .exceptions import PreconditionError
from .themed_console import ThemedConsole

logger = logging.getLogger(__name__)


def _resolve_value(
    console: ThemedConsole,
    label: str,
    current: Optional[str],
    default: Optional[str],
    no_prompt: bool,
) -> str:
    if current:
        return current
    if default:
        return default
    if no_prompt:
        raise PreconditionError(
            f"No {label} set for this environment and prompting is disabled. "
            f"Run 'shipit config set defaults.{label} <value>' or set it on the environment."
        )
    value = Prompt.ask(f"Select a {label}", console=console).strip()
    if not value:
        raise PreconditionError(f"A {label} is required")
    return value


def ensure_subscription_and_location(
    ctx: RunContext,
    console: ThemedConsole,
    env: Environment,
    account_manager: AccountManager,
    no_prompt: bool = False,
) -> None:
    """Make sure ``env`` has a subscription and a location.

    Missing values come from the account defaults, then from an interactive
    prompt. The environment is saved only when something changed.
    """
    ctx.raise_if_cancelled()
    changed = False

    checks = (
        ("subscription", SUBSCRIPTION_KEY, env.subscription_id, account_manager.default_subscription),
        ("location", LOCATION_KEY, env.location, account_manager.default_location),
    )
    for label, key, current, default_fn in checks:
        value = _resolve_value(console, label, current, None if current else default_fn(), no_prompt)
        if value != current:
            env.set(key, value)
            changed = True
            logger.debug("environment %s: %s set to %s", env.name, key, value)

    if changed:
        env.save()
