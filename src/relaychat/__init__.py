"""
relaychat: a terminal chat client for a single webhook responder.

Each module hides a specific design decision: the transcript representation,
the responder transport, the exchange lifecycle, and the terminal UI.
"""

__version__ = "0.1.0"

from .exchange import ExchangeController, NotifyLevel
from .responder import (
    DEFAULT_WEBHOOK_URL,
    Responder,
    ResponderError,
    WebhookResponder,
    create_responder,
)
from .transcript import Message, MessageKind, MessageRole, TranscriptStore

__all__ = [
    "DEFAULT_WEBHOOK_URL",
    "ExchangeController",
    "Message",
    "MessageKind",
    "MessageRole",
    "NotifyLevel",
    "Responder",
    "ResponderError",
    "TranscriptStore",
    "WebhookResponder",
    "create_responder",
]
