"""Textual implementations of the exchange capabilities.

Hides how notifications become toasts and how text reaches the system
clipboard from inside a terminal application.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

import pyperclip
from rich.markup import escape

from ..exchange import NotifyLevel
from .config import NOTIFY_ERROR_TIMEOUT_SECONDS, NOTIFY_TIMEOUT_SECONDS

if TYPE_CHECKING:
    from textual.app import App


class TextualNotifier:
    """Shows notifications as Textual toasts."""

    _SEVERITY = {
        NotifyLevel.INFO: "information",
        NotifyLevel.SUCCESS: "information",
        NotifyLevel.ERROR: "error",
    }

    def __init__(self, app: "App") -> None:
        self._app = app

    def notify(
        self, level: NotifyLevel, message: str, description: str | None = None
    ) -> None:
        severity = self._SEVERITY.get(level, "information")
        timeout = NOTIFY_ERROR_TIMEOUT_SECONDS if level == NotifyLevel.ERROR else NOTIFY_TIMEOUT_SECONDS
        # Toast bodies are parsed as markup; failure details may contain brackets.
        if description:
            self._app.notify(
                escape(description), title=message, severity=severity, timeout=timeout
            )
        else:
            self._app.notify(escape(message), severity=severity, timeout=timeout)


class SystemClipboard:
    """Clipboard backed by pyperclip.

    When no system clipboard mechanism is available (e.g. over SSH without
    xclip), ``fallback`` is used instead; in the TUI that is the terminal's
    OSC 52 clipboard.
    """

    def __init__(self, fallback: Callable[[str], None] | None = None) -> None:
        self._fallback = fallback

    def copy(self, text: str) -> bool:
        try:
            pyperclip.copy(text)
            return True
        except pyperclip.PyperclipException:
            if self._fallback is None:
                return False
            self._fallback(text)
            return True
