"""Context object threaded through every action run."""

import threading
from typing import List, Optional

from ..exceptions import ActionCancelledError


class RunContext:
    """Per-invocation context shared by a command and its child actions.

    Carries the cancellation flag and the stack of command paths currently
    executing. Actions may read it but should only call ``cancel``.
    """

    def __init__(self, quiet: bool = False, cancel_event: Optional[threading.Event] = None):
        self.quiet = quiet
        self._cancel_event = cancel_event or threading.Event()
        self.command_paths: List[str] = []

    def cancel(self) -> None:
        self._cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise ActionCancelledError when cancellation was requested."""
        if self.cancelled:
            current = self.current_path or "command"
            raise ActionCancelledError(f"'{current}' was cancelled")

    @property
    def current_path(self) -> Optional[str]:
        return self.command_paths[-1] if self.command_paths else None

    @property
    def is_child(self) -> bool:
        """True while running inside another command."""
        return len(self.command_paths) > 1
