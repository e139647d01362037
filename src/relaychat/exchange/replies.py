"""Reply extraction from responder payloads.

The responder's output schema is not fixed, so the reply is probed from a
fixed list of fields. A differently shaped success payload degrades to a
fallback string instead of surfacing as an error.
"""

import json
from collections.abc import Mapping
from typing import Any

from ..transcript import NO_REPLY_FALLBACK

REPLY_FIELDS = ("response", "output", "text")


def extract_reply(payload: Mapping[str, Any]) -> str:
    """Return the first truthy reply field, or the fallback string.

    Non-string values are rendered as JSON text.
    """
    for field in REPLY_FIELDS:
        value = payload.get(field)
        if value:
            if isinstance(value, str):
                return value
            return json.dumps(value, ensure_ascii=False)
    return NO_REPLY_FALLBACK
