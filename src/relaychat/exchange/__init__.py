"""Exchange module for relaychat.

Drives one prompt/reply cycle at a time against the responder.
"""

from .capabilities import Clipboard, Notifier, NotifyLevel
from .controller import ExchangeController
from .replies import REPLY_FIELDS, extract_reply
from .state import IDLE, CancellationHandle, ExchangeState, Idle, Pending

__all__ = [
    "IDLE",
    "REPLY_FIELDS",
    "CancellationHandle",
    "Clipboard",
    "ExchangeController",
    "ExchangeState",
    "Idle",
    "Notifier",
    "NotifyLevel",
    "Pending",
    "extract_reply",
]
