from .base import DebugCallback, Responder
from .errors import (
    EmptyResponseError,
    MalformedResponseError,
    ResponderError,
    ResponderHTTPError,
    ResponderTransportError,
)
from .factory import create_responder
from .webhook import DEFAULT_WEBHOOK_URL, WebhookResponder

__all__ = [
    "DEFAULT_WEBHOOK_URL",
    "DebugCallback",
    "EmptyResponseError",
    "MalformedResponseError",
    "Responder",
    "ResponderError",
    "ResponderHTTPError",
    "ResponderTransportError",
    "WebhookResponder",
    "create_responder",
]
