"""Themed console with automatic dark/light detection."""

import os
import sys
from dataclasses import dataclass
from typing import IO, Dict, Optional

from rich.console import Console as RichConsole


THEMES: Dict[str, Dict[str, str]] = {
    "dark": {"success": "green", "error": "red", "warning": "yellow", "info": "cyan", "dim": "dim"},
    "light": {"success": "green", "error": "red", "warning": "dark_orange", "info": "blue", "dim": "dim"},
}


@dataclass
class Handles:
    """Raw text streams behind the console."""
    stdout: IO[str]
    stderr: IO[str]


class ThemedConsole(RichConsole):
    """Console with theme support and semantic color methods."""

    def __init__(
        self,
        theme_name: str = "auto",
        stdout: Optional[IO[str]] = None,
        stderr: Optional[IO[str]] = None,
        **kwargs,
    ):
        self._stdout = stdout
        self._stderr = stderr
        super().__init__(file=stdout, **kwargs)
        self.current_theme_name = theme_name
        self.theme = self._resolve_theme()

    def _resolve_theme(self) -> Dict[str, str]:
        """Resolve theme name to actual theme dict."""
        if self.current_theme_name == "auto":
            detected = "dark" if self._is_dark_terminal() else "light"
            return THEMES[detected]
        return THEMES.get(self.current_theme_name, THEMES["dark"])

    def _is_dark_terminal(self) -> bool:
        """Detect if terminal has dark background."""
        # COLORFGBG is set by some terminals, e.g. "15;0"
        colorfgbg = os.environ.get("COLORFGBG", "")
        if colorfgbg and ";" in colorfgbg:
            bg = colorfgbg.split(";")[-1]
            if bg.isdigit():
                return int(bg) <= 7

        if os.environ.get("THEME", "").lower() in ["dark", "dracula", "monokai", "nord"]:
            return True

        return False

    def _colorized_print(self, text: str, style_key: str) -> None:
        self.print(self.get_styled(text, style_key))

    # Semantic color methods
    def success(self, text: str) -> None:
        """Print success message."""
        self._colorized_print(text, "success")

    def error(self, text: str) -> None:
        """Print error message."""
        self._colorized_print(text, "error")

    def warning(self, text: str) -> None:
        """Print warning message."""
        self._colorized_print(text, "warning")

    def info(self, text: str) -> None:
        """Print info message."""
        self._colorized_print(text, "info")

    def dim(self, text: str) -> None:
        """Print dimmed text."""
        self._colorized_print(text, "dim")

    def get_styled(self, text: str, style_key: str) -> str:
        """Get styled text without printing."""
        color = self.theme.get(style_key, self.theme.get("dim", "dim"))
        return f"[{color}]{text}[/{color}]"

    def warning_format(self, text: str) -> str:
        """Format a warning for direct writes to a raw stream.

        Escape codes are only added when the console is attached to a terminal.
        """
        if not self.is_terminal:
            return text
        return f"\x1b[33m{text}\x1b[0m"

    def message(self, ctx, text: str) -> None:
        """Print a plain line on stdout unless the run is in quiet mode."""
        if ctx is not None and getattr(ctx, "quiet", False):
            return
        self.print(text, markup=False, highlight=False)

    def handles(self) -> Handles:
        """Return the stdout/stderr streams used by this console."""
        return Handles(
            stdout=self._stdout or sys.stdout,
            stderr=self._stderr or sys.stderr,
        )

    def switch_theme(self, theme_name: str) -> None:
        """Switch to a different theme for this process."""
        if theme_name not in ["auto", "dark", "light"]:
            raise ValueError(f"Unknown theme: {theme_name}")

        self.current_theme_name = theme_name
        self.theme = self._resolve_theme()

    def get_resolved_theme_name(self) -> str:
        """Get the actual resolved theme name (useful for 'auto' mode)."""
        if self.current_theme_name == "auto":
            return "dark" if self._is_dark_terminal() else "light"
        return self.current_theme_name
