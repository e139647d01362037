"""Transcript module for relaychat.

Holds the ordered messages of the single conversation.
"""

from .models import (
    CANCELLED_SENTINEL,
    ERROR_NOTICE,
    ERROR_SENTINEL,
    NO_REPLY_FALLBACK,
    STOPPED_NOTICE,
    Message,
    MessageKind,
    MessageRole,
)
from .store import TranscriptStore

__all__ = [
    "CANCELLED_SENTINEL",
    "ERROR_NOTICE",
    "ERROR_SENTINEL",
    "NO_REPLY_FALLBACK",
    "STOPPED_NOTICE",
    "Message",
    "MessageKind",
    "MessageRole",
    "TranscriptStore",
]
