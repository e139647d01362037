"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Input history management
- Send/Stop/Clear button switching while a response is pending
- Chat message rendering and copy feedback
- Welcome panel with suggested prompts
- Log rendering and level filtering
"""

from collections.abc import Sequence
from datetime import datetime

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Input, RichLog, Static

from ..transcript import Message as TranscriptMessage
from .config import (
    COPIED_FEEDBACK_SECONDS,
    INPUT_HISTORY_MAX_SIZE,
    INPUT_PLACEHOLDER,
    LOG_TIMESTAMP_FORMAT,
    SUGGESTED_PROMPTS,
    THINKING_TEXT,
    WELCOME_GREETING,
    WELCOME_HINT,
    LogLevel,
)
from .formatting import (
    format_timestamp,
    message_classes,
    render_content,
    speaker_label,
    truncate_log_message,
)


class HistoryInput(Input):
    """Input widget with command history support.

    Use Up/Down arrow keys to navigate through history.
    """

    def __init__(self, *args, max_history: int = INPUT_HISTORY_MAX_SIZE, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1
        self._current_input: str = ""
        self._max_history = max_history

    def _on_key(self, event) -> None:
        """Handle key events for history navigation."""
        if event.key == "up":
            if self._history:
                if self._history_index == -1:
                    self._current_input = self.value
                    self._history_index = len(self._history) - 1
                elif self._history_index > 0:
                    self._history_index -= 1
                self.value = self._history[self._history_index]
                self.cursor_position = len(self.value)
            event.prevent_default()
            event.stop()
        elif event.key == "down":
            if self._history_index != -1:
                if self._history_index < len(self._history) - 1:
                    self._history_index += 1
                    self.value = self._history[self._history_index]
                else:
                    self._history_index = -1
                    self.value = self._current_input
                self.cursor_position = len(self.value)
            event.prevent_default()
            event.stop()

    def add_to_history(self, command: str) -> None:
        """Add a command to history."""
        if command and (not self._history or self._history[-1] != command):
            self._history.append(command)
            del self._history[:-self._max_history]
        self._history_index = -1
        self._current_input = ""


class ChatInputBar(Horizontal):
    """Input line with Send, Stop and Clear buttons.

    While a response is pending the input is disabled and Stop replaces Send.
    """

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class StopRequested(Message):
        """The user asked to stop the pending response."""

    class ClearRequested(Message):
        """The user asked to clear the conversation."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._pending = False

    def compose(self) -> ComposeResult:
        yield HistoryInput(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button("Send", id="send-btn", variant="primary", disabled=True).with_tooltip(
            "Send message (Enter)"
        )
        yield Button("Stop", id="stop-btn", variant="error").with_tooltip(
            "Stop the response (Esc)"
        )
        yield Button("Clear", id="clear-btn").with_tooltip("Clear chat (Ctrl+K)")

    def on_mount(self) -> None:
        self.query_one("#stop-btn", Button).display = False
        self.query_one("#clear-btn", Button).display = False

    def on_input_changed(self, event: Input.Changed) -> None:
        self.query_one("#send-btn", Button).disabled = not event.value.strip()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "send-btn":
            self._submit()
        elif button_id == "stop-btn":
            self.post_message(self.StopRequested())
        elif button_id == "clear-btn":
            self.post_message(self.ClearRequested())
        else:
            return
        event.stop()

    def _submit(self) -> None:
        text_input = self.query_one("#chat-input", HistoryInput)
        value = text_input.value
        if self._pending or not value.strip():
            return
        text_input.add_to_history(value)
        text_input.value = ""
        self.post_message(self.Submitted(value))

    def set_pending(self, pending: bool, has_messages: bool) -> None:
        """Switch controls between the idle and pending layouts."""
        self._pending = pending
        text_input = self.query_one("#chat-input", HistoryInput)
        text_input.disabled = pending
        self.query_one("#send-btn", Button).display = not pending
        self.query_one("#stop-btn", Button).display = pending
        clear_btn = self.query_one("#clear-btn", Button)
        clear_btn.display = has_messages
        clear_btn.disabled = pending
        if not pending:
            text_input.focus()

    def set_text(self, text: str) -> None:
        """Put ``text`` in the input without sending it."""
        text_input = self.query_one("#chat-input", HistoryInput)
        text_input.value = text
        text_input.cursor_position = len(text)
        text_input.focus()

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", HistoryInput).focus()


class MessageView(Vertical):
    """One transcript entry: header, content and, for replies, a Copy button."""

    class CopyRequested(Message):
        """The user pressed Copy on a message."""

        def __init__(self, view: "MessageView", content: str) -> None:
            super().__init__()
            self.view = view
            self.content = content

    def __init__(self, message: TranscriptMessage, **kwargs) -> None:
        super().__init__(classes=message_classes(message), **kwargs)
        self._message = message

    @property
    def message(self) -> TranscriptMessage:
        return self._message

    def compose(self) -> ComposeResult:
        header = Text(f"{speaker_label(self._message)} [{format_timestamp(self._message)}]")
        with Horizontal(classes="message-header-row"):
            yield Static(header, classes="message-header")
            if self._message.is_copyable:
                yield Button("Copy", classes="copy-btn")
        yield Static(render_content(self._message), classes="message-content")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.has_class("copy-btn"):
            event.stop()
            self.post_message(self.CopyRequested(self, self._message.content))

    def show_copied(self) -> None:
        """Flip the Copy button to a confirmation for a moment."""
        button = self.query_one(".copy-btn", Button)
        button.label = "Copied"
        button.add_class("-copied")
        self.set_timer(COPIED_FEEDBACK_SECONDS, self._reset_copy_button)

    def _reset_copy_button(self) -> None:
        button = self.query_one(".copy-btn", Button)
        button.label = "Copy"
        button.remove_class("-copied")


class WelcomePanel(Vertical):
    """Greeting shown while the transcript is empty."""

    class PromptSelected(Message):
        """A suggested prompt was picked."""

        def __init__(self, prompt: str) -> None:
            super().__init__()
            self.prompt = prompt

    def __init__(self, *args, prompts: Sequence[str] = SUGGESTED_PROMPTS, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._prompts = tuple(prompts)

    def compose(self) -> ComposeResult:
        yield Static("👋", classes="welcome-wave")
        yield Static(WELCOME_GREETING, classes="welcome-title")
        yield Static(WELCOME_HINT, classes="welcome-hint")
        yield Static("Try asking:", classes="welcome-hint")
        with Horizontal(classes="suggested-prompts"):
            for index, prompt in enumerate(self._prompts):
                yield Button(prompt, id=f"prompt-{index}", classes="suggested-prompt")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("prompt-"):
            event.stop()
            self.post_message(self.PromptSelected(self._prompts[int(button_id[7:])]))


class ChatHistoryWidget(VerticalScroll):
    """Scrollable transcript rendered from controller snapshots."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered = 0

    def compose(self) -> ComposeResult:
        yield WelcomePanel(id="welcome")
        yield Static(THINKING_TEXT, id="thinking")

    def on_mount(self) -> None:
        self.query_one("#thinking", Static).display = False

    def sync(self, messages: Sequence[TranscriptMessage], pending: bool) -> None:
        """Bring the display in line with the transcript.

        The transcript only grows or is emptied, so new entries are mounted
        incrementally and a shorter snapshot means a clear.
        """
        if len(messages) < self._rendered:
            self.query(MessageView).remove()
            self._rendered = 0

        thinking = self.query_one("#thinking", Static)
        new_views = [MessageView(message) for message in messages[self._rendered:]]
        if new_views:
            self.mount(*new_views, before=thinking)
        self._rendered = len(messages)

        self.query_one("#welcome", WelcomePanel).display = not messages
        thinking.display = pending
        self.border_subtitle = (
            f"{len(messages)} messages" if messages else "Conversation history"
        )
        self.scroll_end(animate=False)

    @property
    def rendered_count(self) -> int:
        return self._rendered


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log lines from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    _LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    _COMPONENT_COLORS = {
        "TUI": "cyan",
        "Exchange": "green",
        "Webhook": "magenta",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def log_entry(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log line if it meets the current level threshold."""
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self._LEVEL_COLORS.get(level, "white")
        comp_color = self._COMPONENT_COLORS.get(component, "white")

        line = Text.assemble(
            (f"{timestamp} ", "dim"),
            (f"{LogLevel.name(level):<5} ", level_color),
            (f"[{component}] ", comp_color),
            truncate_log_message(message),
        )
        self.write(line)

    def info(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.INFO)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
