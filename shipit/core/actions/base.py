"""Base action class for command execution."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from ..context import RunContext


@dataclass
class ActionResult:
    """Result of an action execution."""
    message: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)


class BaseAction(ABC):
    """Base class for all actions.

    An action is one unit of work behind a command. It can run on its own,
    dispatched by the CLI, or as a child step of a composite action. Either
    way it is invoked through the middleware runner and:
    1. Reads whatever flags and arguments were assigned to it
    2. Performs its effect (run)
    3. Returns an ActionResult, or raises to signal failure
    """

    @abstractmethod
    def run(self, ctx: RunContext) -> ActionResult:
        """Execute the action's main logic.

        Args:
            ctx: The run context (cancellation and command path stack)

        Returns:
            The action's result
        """
        pass


ActionInitializer = Callable[[], BaseAction]
