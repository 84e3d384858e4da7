"""CLI utilities and decorators."""
import logging
import sys
from contextlib import contextmanager
from functools import wraps
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.status import Status

from .exceptions import ActionCancelledError, ShipitError
from .themed_console import ThemedConsole

console = ThemedConsole()


@contextmanager
def loading_status(message: str, success_message: str = "", out: Optional[Console] = None):
    """Universal context manager to show loading status.

    Writes to ``out`` when given, otherwise to the shared console.
    """
    out = out if out is not None else console
    status = Status(f"[cyan]{message}...[/cyan]", console=out)
    status.start()
    try:
        yield
        if success_message:
            out.print(f"[green]✓[/green] {success_message}")
    except Exception as e:
        out.print(f"[red]✗ Failed: {escape(str(e))}[/red]")
        raise
    finally:
        status.stop()


def handle_errors(func):
    """Decorator to report CLI errors and turn them into exit codes."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (ActionCancelledError, KeyboardInterrupt):
            console.print("[yellow]Cancelled[/yellow]")
            sys.exit(130)
        except ShipitError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            sys.exit(1)
        except Exception as e:
            logging.getLogger(func.__module__).debug("Unhandled exception", exc_info=True)
            console.print(f"[red]Unexpected error: {escape(str(e))}[/red]")
            sys.exit(1)
    return wrapper


def configure_logging(debug: bool = False) -> None:
    """Route log records to stderr through rich."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=debug,
    )
    root = logging.getLogger("shipit")
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
