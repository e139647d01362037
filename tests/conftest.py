"""Pytest configuration and shared fixtures."""
import asyncio
import os
from typing import Any

import pytest

from relaychat.exchange import ExchangeController, NotifyLevel
from relaychat.responder import Responder


class FakeResponder(Responder):
    """In-process responder.

    Returns ``payload`` or raises ``error``. With ``gated`` set, every call
    blocks until ``release`` is set, leaving the exchange pending.
    """

    def __init__(
        self,
        payload: dict[str, Any] | None = None,
        error: BaseException | None = None,
        gated: bool = False,
    ) -> None:
        self.payload = payload if payload is not None else {"response": "hi there"}
        self.error = error
        self.gated = gated
        self.prompts: list[str] = []
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.closed = False

    async def send(self, prompt: str) -> dict[str, Any]:
        self.prompts.append(prompt)
        self.started.set()
        if self.gated:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.payload

    async def close(self) -> None:
        self.closed = True


class RecordingNotifier:
    def __init__(self) -> None:
        self.calls: list[tuple[NotifyLevel, str, str | None]] = []

    def notify(self, level: NotifyLevel, message: str, description: str | None = None) -> None:
        self.calls.append((level, message, description))

    def levels(self) -> list[NotifyLevel]:
        return [level for level, _, _ in self.calls]


class RecordingClipboard:
    def __init__(self, succeed: bool = True) -> None:
        self.succeed = succeed
        self.copied: list[str] = []

    def copy(self, text: str) -> bool:
        if self.succeed:
            self.copied.append(text)
        return self.succeed


@pytest.fixture
def responder():
    return FakeResponder()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def clipboard():
    return RecordingClipboard()


@pytest.fixture
def controller(responder, notifier, clipboard):
    return ExchangeController(responder, notifier=notifier, clipboard=clipboard)


@pytest.fixture(scope="session")
def webhook_url():
    """Return the real webhook URL for integration tests, if configured."""
    return os.getenv("RELAYCHAT_WEBHOOK_URL")
