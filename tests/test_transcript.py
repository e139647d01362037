"""Unit tests for the transcript module."""
from datetime import datetime

import pytest
from pydantic import ValidationError

from relaychat.transcript import (
    CANCELLED_SENTINEL,
    ERROR_SENTINEL,
    STOPPED_NOTICE,
    Message,
    MessageKind,
    MessageRole,
    TranscriptStore,
)


class TestMessage:
    """Tests for the Message model."""

    def test_user_message_defaults(self):
        msg = Message.user("hello")

        assert msg.role == MessageRole.USER
        assert msg.content == "hello"
        assert msg.kind == MessageKind.NORMAL
        assert isinstance(msg.timestamp, datetime)
        assert msg.timestamp.tzinfo is not None

    def test_timestamp_serializes_as_iso8601(self):
        msg = Message.user("hello")

        dumped = msg.model_dump(mode="json")
        assert datetime.fromisoformat(dumped["timestamp"]) == msg.timestamp

    def test_message_is_immutable(self):
        msg = Message.assistant("hi")

        with pytest.raises(ValidationError):
            msg.content = "changed"  # type: ignore[misc]

    def test_error_message_carries_sentinel_and_kind(self):
        msg = Message.error()

        assert msg.role == MessageRole.ASSISTANT
        assert msg.kind == MessageKind.ERROR
        assert msg.content.startswith(ERROR_SENTINEL)

    def test_stopped_message_is_fixed_notice(self):
        msg = Message.stopped()

        assert msg.kind == MessageKind.CANCELLED
        assert msg.content == STOPPED_NOTICE
        assert msg.content.startswith(CANCELLED_SENTINEL)

    def test_only_normal_replies_are_copyable(self):
        assert Message.assistant("answer").is_copyable
        assert not Message.user("question").is_copyable
        assert not Message.error().is_copyable
        assert not Message.stopped().is_copyable

    def test_reply_starting_with_sentinel_is_still_copyable(self):
        """Classification comes from kind, not from the text."""
        msg = Message.assistant(f"{ERROR_SENTINEL} is the cross mark emoji")

        assert msg.kind == MessageKind.NORMAL
        assert msg.is_copyable


class TestTranscriptStore:
    """Tests for TranscriptStore."""

    def test_starts_empty(self):
        store = TranscriptStore()

        assert len(store) == 0
        assert store.all() == ()
        assert store.last() is None

    def test_append_preserves_order(self):
        store = TranscriptStore()
        first = Message.user("one")
        second = Message.assistant("two")

        store.append(first)
        store.append(second)

        assert store.all() == (first, second)
        assert store.last() is second

    def test_all_returns_snapshot(self):
        store = TranscriptStore()
        store.append(Message.user("one"))

        snapshot = store.all()
        store.append(Message.assistant("two"))

        assert len(snapshot) == 1
        assert len(store.all()) == 2

    def test_clear_empties_everything(self):
        store = TranscriptStore()
        store.append(Message.user("one"))
        store.append(Message.assistant("two"))

        store.clear()

        assert store.all() == ()
        assert len(store) == 0
