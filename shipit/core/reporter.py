"""Reporter classes for controlling command output."""

from contextlib import contextmanager
from typing import Generator, Optional

from ..themed_console import ThemedConsole
from ..utils import loading_status


class Reporter:
    """Default reporter that displays progress with spinners."""

    def __init__(self, console: ThemedConsole):
        self.console = console

    @contextmanager
    def step(self, title: str, done: Optional[str] = None) -> Generator[None, None, None]:
        """Execute a step with a progress indicator.

        Args:
            title: Step description (e.g., "Packaging service api")
            done: Optional completion message
        """
        with loading_status(title, done or "", out=self.console):
            yield

    def info(self, message: str) -> None:
        """Display an info message."""
        self.console.info(message)

    def success(self, message: str) -> None:
        """Display a success message."""
        self.console.success(message)

    def error(self, message: str) -> None:
        """Display an error message."""
        self.console.error(message)

    def warning(self, message: str) -> None:
        """Display a warning message."""
        self.console.warning(message)

    def dim(self, message: str) -> None:
        """Display a dimmed/secondary message."""
        self.console.dim(message)


class NullReporter:
    """No-op reporter for testing."""

    @contextmanager
    def step(self, title: str, done: Optional[str] = None) -> Generator[None, None, None]:
        """No-op context manager."""
        yield

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def dim(self, message: str) -> None:
        pass
