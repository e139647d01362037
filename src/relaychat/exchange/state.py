"""Request lifecycle state.

An exchange is either idle or pending exactly one outbound call. The pending
state owns the only handle able to cancel that call.
"""

import asyncio
from dataclasses import dataclass
from typing import Any


class CancellationHandle:
    """Single-use token for abandoning the in-flight call.

    ``cancel()`` records the request and cancels the underlying task. The
    flag stays set even if the task had already finished, so the settlement
    path can tell a user stop from a normal completion.
    """

    __slots__ = ("_task", "_cancelled")

    def __init__(self, task: "asyncio.Future[Any]") -> None:
        self._task = task
        self._cancelled = False

    @property
    def task(self) -> "asyncio.Future[Any]":
        return self._task

    @property
    def cancelled(self) -> bool:
        """Return ``True`` once cancellation has been requested."""
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        self._task.cancel()


@dataclass(frozen=True)
class Idle:
    """No outstanding request."""


@dataclass(frozen=True)
class Pending:
    """Exactly one outstanding request."""

    handle: CancellationHandle


ExchangeState = Idle | Pending

IDLE = Idle()
