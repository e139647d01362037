"""In-memory transcript store.

Session-only: messages live for as long as the store does and are lost when
the application exits.
"""

from .models import Message


class TranscriptStore:
    """Ordered, append-only list of messages with an explicit clear.

    The store does not know about pending requests; whoever owns it is
    responsible for not clearing it mid-exchange.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []

    def append(self, message: Message) -> None:
        """Add a message to the end of the transcript."""
        self._messages.append(message)

    def clear(self) -> None:
        """Remove every message."""
        self._messages.clear()

    def all(self) -> tuple[Message, ...]:
        """Snapshot of the messages in display order."""
        return tuple(self._messages)

    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    def __len__(self) -> int:
        return len(self._messages)
