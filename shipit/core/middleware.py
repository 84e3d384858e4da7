"""Middleware runner shared by top-level commands and nested child actions."""

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from .context import RunContext

if TYPE_CHECKING:
    from .actions.base import ActionResult, BaseAction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Options:
    """Identity of a single action invocation."""

    command_path: str
    name: str = ""
    args: Tuple[str, ...] = ()


NextFn = Callable[[], "ActionResult"]
Middleware = Callable[[RunContext, Options, NextFn], "ActionResult"]


@dataclass
class Span:
    name: str
    command_path: str
    child: bool
    duration: float
    error: Optional[str] = None


@dataclass
class SpanRecorder:
    """Collects one span per action run."""

    spans: List[Span] = field(default_factory=list)

    def record(self, span: Span) -> None:
        self.spans.append(span)

    def paths(self) -> List[str]:
        return [span.command_path for span in self.spans]


class TelemetryMiddleware:
    """Record a timed span for every run, whether it succeeded or failed."""

    def __init__(self, recorder: SpanRecorder):
        self.recorder = recorder

    def __call__(self, ctx: RunContext, options: Options, next_fn: NextFn) -> "ActionResult":
        start = time.monotonic()
        error = None
        try:
            return next_fn()
        except BaseException as e:
            error = type(e).__name__
            raise
        finally:
            span = Span(
                name=f"cmd.{options.command_path}",
                command_path=options.command_path,
                child=ctx.is_child,
                duration=time.monotonic() - start,
                error=error,
            )
            self.recorder.record(span)
            logger.debug("span %s took %.3fs (error=%s)", span.name, span.duration, span.error)


def debug_middleware(ctx: RunContext, options: Options, next_fn: NextFn) -> "ActionResult":
    logger.debug("running '%s'", options.command_path)
    result = next_fn()
    logger.debug("finished '%s'", options.command_path)
    return result


class MiddlewareRunner:
    """Runs actions wrapped by the registered middlewares.

    Middlewares execute in registration order, outermost first. The same
    chain is used for top-level commands and for child actions run from
    inside another action.
    """

    def __init__(self, middlewares: Optional[List[Middleware]] = None):
        self.middlewares: List[Middleware] = list(middlewares or [])

    def use(self, middleware: Middleware) -> "MiddlewareRunner":
        self.middlewares.append(middleware)
        return self

    def run_action(self, ctx: RunContext, options: Options, action: "BaseAction") -> "ActionResult":
        """Run a command invoked directly by the user."""
        return self._run(ctx, options, action)

    def run_child_action(self, ctx: RunContext, options: Options, action: "BaseAction") -> "ActionResult":
        """Run an action on behalf of another action."""
        return self._run(ctx, options, action)

    def _run(self, ctx: RunContext, options: Options, action: "BaseAction") -> "ActionResult":
        ctx.raise_if_cancelled()
        ctx.command_paths.append(options.command_path)
        try:
            return self._chain(ctx, options, action, 0)
        finally:
            ctx.command_paths.pop()

    def _chain(self, ctx: RunContext, options: Options, action: "BaseAction", index: int) -> "ActionResult":
        if index == len(self.middlewares):
            return action.run(ctx)

        middleware = self.middlewares[index]
        return middleware(ctx, options, lambda: self._chain(ctx, options, action, index + 1))
