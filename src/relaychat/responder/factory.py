from typing import Any

from .base import Responder
from .webhook import WebhookResponder


def create_responder(kind: str = "webhook", **config: Any) -> Responder:
    """Create a responder instance.

    This factory function hides the instantiation logic for responders.

    Args:
        kind: Responder type (only 'webhook' for now)
        **config: Responder-specific configuration
            For webhook:
                - url: str (required)
                - client: httpx.AsyncClient | None
                - headers: dict[str, str] | None

    Returns:
        Initialized responder instance

    Raises:
        ValueError: If responder type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> responder = create_responder(
        ...     "webhook",
        ...     url="http://localhost:5678/webhook/chat"
        ... )
    """
    if kind.lower() == "webhook":
        if "url" not in config:
            raise TypeError("Webhook responder requires 'url' in config")
        return WebhookResponder(**config)

    raise ValueError(
        f"Unsupported responder: {kind}. "
        f"Supported responders: 'webhook'"
    )
