"""Exchange controller.

Owns the transcript and the request lifecycle. Every submitted prompt moves
the controller from idle to pending and back, appending exactly one user
message and, on settlement, exactly one assistant message.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from ..responder import DebugCallback, Responder
from ..transcript import Message, TranscriptStore
from .capabilities import Clipboard, Notifier, NotifyLevel
from .replies import extract_reply
from .state import IDLE, CancellationHandle, ExchangeState, Pending

COMPONENT = "Exchange"


class ExchangeController:
    """Single-flight chat exchange over a responder.

    The UI reads ``messages`` and ``is_pending`` snapshots and drives the
    controller through ``submit``, ``cancel``, ``clear_transcript`` and
    ``copy_message``. No other path mutates the transcript or the state.

    Example:
        controller = ExchangeController(responder, notifier=notifier)
        reply = await controller.submit("hello")
    """

    def __init__(
        self,
        responder: Responder,
        transcript: TranscriptStore | None = None,
        notifier: Notifier | None = None,
        clipboard: Clipboard | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._responder = responder
        self._transcript = transcript if transcript is not None else TranscriptStore()
        self._notifier = notifier
        self._clipboard = clipboard
        self._on_change = on_change
        self._state: ExchangeState = IDLE
        self._debug_callback: DebugCallback | None = None

    # ------------------------------------------------------------------
    # Read-only view

    @property
    def state(self) -> ExchangeState:
        return self._state

    @property
    def is_pending(self) -> bool:
        return isinstance(self._state, Pending)

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._transcript.all()

    @property
    def can_clear(self) -> bool:
        return not self.is_pending

    @property
    def responder(self) -> Responder:
        return self._responder

    # ------------------------------------------------------------------
    # Wiring

    def set_on_change(self, listener: Callable[[], None] | None) -> None:
        """Register the callback fired after every transcript or state change."""
        self._on_change = listener

    def set_notifier(self, notifier: Notifier | None) -> None:
        self._notifier = notifier

    def set_clipboard(self, clipboard: Clipboard | None) -> None:
        self._clipboard = clipboard

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Route diagnostics from the controller and its responder."""
        self._debug_callback = callback
        self._responder.set_debug_callback(callback)

    # ------------------------------------------------------------------
    # Operations

    async def submit(self, prompt_text: str) -> Message | None:
        """Run one exchange for ``prompt_text``.

        Returns the assistant message appended on settlement, or ``None``
        when the prompt was blank or another exchange is still pending.
        Responder failures never propagate; cancellation of this coroutine
        from outside does, after the state has been reset.
        """
        if not prompt_text.strip():
            self._debug("debug", "Ignoring blank prompt")
            return None
        if self.is_pending:
            self._debug("warning", "Exchange already pending, submit ignored")
            return None

        # Nothing below may await before the state is Pending.
        self._transcript.append(Message.user(prompt_text))
        task = asyncio.ensure_future(self._responder.send(prompt_text))
        handle = CancellationHandle(task)
        self._state = Pending(handle)

        try:
            self._debug("info", f"Sent prompt: '{prompt_text[:50]}'")
            self._changed()
            return await self._settle(handle)
        finally:
            if not task.done():
                task.cancel()
            self._state = IDLE
            self._changed()

    def cancel(self) -> bool:
        """Request cancellation of the pending exchange.

        The settlement path of ``submit`` appends the stop notice; this
        method only signals. Returns ``False`` when nothing is pending.
        """
        if not isinstance(self._state, Pending):
            return False
        self._debug("info", "Cancellation requested")
        self._state.handle.cancel()
        return True

    def clear_transcript(self) -> bool:
        """Empty the transcript. Rejected while an exchange is pending."""
        if self.is_pending:
            self._debug("warning", "Clear rejected while an exchange is pending")
            return False
        self._transcript.clear()
        self._notify(NotifyLevel.SUCCESS, "Chat cleared!")
        self._changed()
        return True

    def copy_message(self, content: str) -> bool:
        """Copy ``content`` to the clipboard and report the outcome."""
        if self._clipboard is not None and self._clipboard.copy(content):
            self._notify(NotifyLevel.SUCCESS, "Copied to clipboard!")
            return True
        self._notify(NotifyLevel.ERROR, "Failed to copy")
        return False

    # ------------------------------------------------------------------
    # Settlement

    async def _settle(self, handle: CancellationHandle) -> Message:
        try:
            payload: dict[str, Any] = await handle.task
        except asyncio.CancelledError:
            if not handle.cancelled:
                raise
            return self._finish_stopped()
        except Exception as e:
            if handle.cancelled:
                return self._finish_stopped()
            return self._finish_failed(e)

        if handle.cancelled:
            return self._finish_stopped()
        return self._finish(Message.assistant(extract_reply(payload)))

    def _finish_stopped(self) -> Message:
        message = self._finish(Message.stopped())
        self._debug("info", "Response stopped by user")
        self._notify(NotifyLevel.INFO, "Response stopped")
        return message

    def _finish_failed(self, error: Exception) -> Message:
        message = self._finish(Message.error())
        description = str(error) or type(error).__name__
        self._debug("error", f"{type(error).__name__}: {description}")
        self._notify(NotifyLevel.ERROR, "Failed to get response", description)
        return message

    def _finish(self, message: Message) -> Message:
        self._transcript.append(message)
        return message

    # ------------------------------------------------------------------

    def _notify(self, level: NotifyLevel, message: str, description: str | None = None) -> None:
        if self._notifier is not None:
            self._notifier.notify(level, message, description)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, COMPONENT, message)
