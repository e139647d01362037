"""Capabilities the exchange controller consumes from its host.

Hides which toolkit shows notifications and which clipboard is written.
The controller only sees these protocols; the TUI and the CLI supply
concrete implementations.
"""

from enum import Enum
from typing import Protocol


class NotifyLevel(str, Enum):
    """Severity of a user-facing notification."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class Notifier(Protocol):
    """Fire-and-forget notification sink (toast, status line, console)."""

    def notify(
        self, level: NotifyLevel, message: str, description: str | None = None
    ) -> None: ...


class Clipboard(Protocol):
    """Clipboard writer reporting whether the copy succeeded."""

    def copy(self, text: str) -> bool: ...
