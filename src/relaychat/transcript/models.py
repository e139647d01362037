"""Data models for the chat transcript.

Hides the representation of a single exchanged message. Messages are
immutable once created; error and cancellation notices are told apart by
their kind, not by the text they carry.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

ERROR_SENTINEL = "❌"
CANCELLED_SENTINEL = "⏹️"

ERROR_NOTICE = f"{ERROR_SENTINEL} Sorry, I encountered an error. Please try again."
STOPPED_NOTICE = f"{CANCELLED_SENTINEL} Response stopped by user."
NO_REPLY_FALLBACK = "No response received"


def _now() -> datetime:
    return datetime.now().astimezone()


class MessageRole(str, Enum):
    """Who produced a message."""

    USER = "user"
    ASSISTANT = "assistant"


class MessageKind(str, Enum):
    """What a message represents in the transcript."""

    NORMAL = "normal"
    ERROR = "error"
    CANCELLED = "cancelled"


class Message(BaseModel):
    """A single entry in the transcript."""

    model_config = ConfigDict(frozen=True)

    role: MessageRole = Field(description="Sender of the message")
    content: str = Field(description="Text of the message")
    kind: MessageKind = Field(default=MessageKind.NORMAL, description="Normal reply or a notice")
    timestamp: datetime = Field(default_factory=_now, description="Creation instant")

    @property
    def is_copyable(self) -> bool:
        """Only real assistant replies offer a copy affordance."""
        return self.role == MessageRole.ASSISTANT and self.kind == MessageKind.NORMAL

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=MessageRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role=MessageRole.ASSISTANT, content=content)

    @classmethod
    def error(cls) -> "Message":
        return cls(role=MessageRole.ASSISTANT, content=ERROR_NOTICE, kind=MessageKind.ERROR)

    @classmethod
    def stopped(cls) -> "Message":
        return cls(role=MessageRole.ASSISTANT, content=STOPPED_NOTICE, kind=MessageKind.CANCELLED)
