from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

DebugCallback = Callable[[str, str, str], None]


class Responder(ABC):
    """Abstract base class for the remote responder.

    This module hides the design decision of how a prompt reaches the service
    that answers it. Implementations must handle:
    - Request construction and transport
    - Status code and body validation
    - Mapping every failure onto the ResponderError hierarchy

    Supports async context manager protocol for proper resource cleanup:
        async with responder:
            payload = await responder.send("hello")
    """

    _debug_callback: DebugCallback | None = None

    @abstractmethod
    async def send(self, prompt: str) -> dict[str, Any]:
        """Send a prompt and return the parsed reply object.

        Args:
            prompt: The user's prompt text, passed through verbatim

        Returns:
            The JSON object the responder answered with

        Raises:
            ResponderError: On transport failure, non-success status,
                empty body, or a body that is not a JSON object
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Route diagnostics as (level, component, message) triples."""
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, self.component, message)

    @property
    def component(self) -> str:
        """Component name used in log lines."""
        return type(self).__name__

    async def __aenter__(self) -> "Responder":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Suppresses "Event loop is closed" errors raised by httpx/anyio while
        tearing down after the loop has already stopped.
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
