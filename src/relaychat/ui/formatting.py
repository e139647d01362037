"""Text formatting helpers for the TUI.

Hides how message headers and log lines are laid out.
"""

from rich.text import Text

from ..transcript import Message, MessageKind, MessageRole
from .config import (
    ASSISTANT_LABEL,
    LOG_MAX_MESSAGE_LENGTH,
    MESSAGE_TIMESTAMP_FORMAT,
    USER_LABEL,
)


def speaker_label(message: Message) -> str:
    return USER_LABEL if message.role == MessageRole.USER else ASSISTANT_LABEL


def format_timestamp(message: Message) -> str:
    """Local wall-clock time of a message."""
    return message.timestamp.astimezone().strftime(MESSAGE_TIMESTAMP_FORMAT)


def message_classes(message: Message) -> str:
    """CSS classes for a message container.

    Error and stopped notices get their own accent; everything else is styled
    by role.
    """
    if message.kind == MessageKind.ERROR:
        variant = "error-message"
    elif message.kind == MessageKind.CANCELLED:
        variant = "stopped-message"
    else:
        variant = f"{message.role.value}-message"
    return f"chat-message {variant}"


def render_content(message: Message) -> Text:
    """Render message text literally, without markup parsing."""
    return Text(message.content, overflow="fold")


def truncate_log_message(message: str, limit: int = LOG_MAX_MESSAGE_LENGTH) -> str:
    if len(message) <= limit:
        return message
    return message[:limit] + "... (truncated)"
