"""Terminal UI module for relaychat.

Provides a Textual-based TUI for chatting with the responder.

Module structure (each module hides a design decision):
- config.py: Display strings, timings and log levels
- themes.py: Color palette
- styles.py: CSS styling (layout decisions)
- formatting.py: Message header and content rendering
- capabilities.py: Toasts and clipboard access
- widgets.py: Custom widgets (input bar, messages, welcome panel, log panel)
- app.py: Application orchestration (user interaction flow)
"""

from .app import RelayChatApp, run_textual_tui
from .capabilities import SystemClipboard, TextualNotifier
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, MessageView, WelcomePanel

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "MessageView",
    "RelayChatApp",
    "SystemClipboard",
    "TextualNotifier",
    "WelcomePanel",
    "run_textual_tui",
]
