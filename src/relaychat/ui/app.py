"""Main Textual TUI application.

Wires the exchange controller to the widgets. The controller owns all chat
state; the app only forwards user actions and re-renders from snapshots.
"""

import asyncio
import contextlib
from urllib.parse import urlparse

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.widgets import Footer, Header

from ..exchange import ExchangeController
from ..responder import Responder
from .capabilities import SystemClipboard, TextualNotifier
from .config import APP_TITLE, LogLevel
from .styles import APP_CSS
from .themes import INDIGO_NIGHT
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, MessageView, WelcomePanel


class RelayChatApp(App):
    """Textual TUI for a single conversation with a webhook responder."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("escape", "stop_response", "Stop", priority=True),
        Binding("ctrl+k", "clear_chat", "Clear Chat", priority=True),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(
        self,
        responder: Responder,
        log_level: str | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__()
        self._log_level = log_level
        self._endpoint = endpoint
        self._controller = ExchangeController(
            responder,
            notifier=TextualNotifier(self),
            clipboard=SystemClipboard(fallback=self.copy_to_clipboard),
            on_change=self._refresh_view,
        )

    @property
    def controller(self) -> ExchangeController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(INDIGO_NIGHT)
        self.theme = "indigo-night"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._controller.set_debug_callback(self._route_debug)

        if self._endpoint:
            self.sub_title = urlparse(self._endpoint).netloc or self._endpoint

        self._refresh_view()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route debug messages to the log panel."""
        with contextlib.suppress(NoMatches):
            log_panel = self.query_one("#debug-panel", DebugPanel)
            log_panel.log_entry(component, message, LogLevel.from_string(level))

    def _refresh_view(self) -> None:
        """Re-render chat and controls from the controller's snapshot."""
        # Workers can settle after the widgets are gone during shutdown.
        with contextlib.suppress(NoMatches):
            messages = self._controller.messages
            pending = self._controller.is_pending
            self.query_one("#chat-history", ChatHistoryWidget).sync(messages, pending)
            self.query_one("#chat-input-bar", ChatInputBar).set_pending(
                pending, has_messages=bool(messages)
            )

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self._run_exchange(event.value)

    @work(group="exchange")
    async def _run_exchange(self, prompt: str) -> None:
        """Run one exchange as a background async worker.

        Not exclusive: a second worker must never cancel the pending one,
        the controller turns it into a no-op instead.
        """
        await self._controller.submit(prompt)

    def on_chat_input_bar_stop_requested(self, event: ChatInputBar.StopRequested) -> None:
        self.action_stop_response()

    def on_chat_input_bar_clear_requested(self, event: ChatInputBar.ClearRequested) -> None:
        self.action_clear_chat()

    def on_welcome_panel_prompt_selected(self, event: WelcomePanel.PromptSelected) -> None:
        self.query_one("#chat-input-bar", ChatInputBar).set_text(event.prompt)

    def on_message_view_copy_requested(self, event: MessageView.CopyRequested) -> None:
        if self._controller.copy_message(event.content):
            event.view.show_copied()

    def action_stop_response(self) -> None:
        """Stop the pending response, if any."""
        self._controller.cancel()

    def action_clear_chat(self) -> None:
        """Clear the chat history."""
        if not self._controller.clear_transcript():
            self.notify("Wait for the response to finish", severity="warning", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant reply to clipboard."""
        for message in reversed(self._controller.messages):
            if message.is_copyable:
                self._controller.copy_message(message.content)
                return
        self.notify("No response to copy", severity="warning", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_textual_tui(
    responder: Responder,
    log_level: str | None = None,
    endpoint: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        responder: Responder that answers prompts
        log_level: Log level for panel (debug/info/warning/error), None to hide
        endpoint: Endpoint URL shown in the header
    """
    app = RelayChatApp(responder=responder, log_level=log_level, endpoint=endpoint)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        await responder.close()
