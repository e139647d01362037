"""Provider factory functions for CLI.

Centralizes creation of the responder from options and environment variables.
Hides configuration details from command implementations.
"""

import os

from ..responder import DEFAULT_WEBHOOK_URL, Responder, create_responder

ENDPOINT_ENV_VAR = "RELAYCHAT_WEBHOOK_URL"


def get_endpoint_url(endpoint: str | None = None) -> str:
    """Resolve the webhook URL.

    Args:
        endpoint: Explicit URL from the command line, wins when given

    Returns:
        The URL to POST prompts to

    Environment variables:
        RELAYCHAT_WEBHOOK_URL: Webhook URL (default: DEFAULT_WEBHOOK_URL)
    """
    return endpoint or os.getenv(ENDPOINT_ENV_VAR) or DEFAULT_WEBHOOK_URL


def get_responder(endpoint: str | None = None) -> Responder:
    """Create the webhook responder for the resolved endpoint."""
    return create_responder("webhook", url=get_endpoint_url(endpoint))
