import json
from typing import Any

import httpx

from .base import Responder
from .errors import (
    EmptyResponseError,
    MalformedResponseError,
    ResponderHTTPError,
    ResponderTransportError,
)

DEFAULT_WEBHOOK_URL = "http://localhost:5678/webhook/chat"


class WebhookResponder(Responder):
    """Responder that POSTs the prompt to a JSON webhook (e.g. an n8n workflow).

    Hidden design decisions:
    - Payload shape: the prompt is duplicated under "prompt" and "message"
      because webhook workflows disagree on which key they read
    - No timeout: a call resolves, fails, or is cancelled by the caller
    - A 2xx body must be a non-empty JSON object; plain text is a failure
    """

    def __init__(
        self,
        url: str = DEFAULT_WEBHOOK_URL,
        client: httpx.AsyncClient | None = None,
        headers: dict[str, str] | None = None,
    ):
        """Initialize webhook responder.

        Args:
            url: Webhook endpoint receiving the POST
            client: Pre-built httpx client (the responder will not close it)
            headers: Extra headers sent with every request
        """
        self._url = url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=None)
        self._headers = {"Content-Type": "application/json", **(headers or {})}

    @property
    def url(self) -> str:
        return self._url

    @property
    def component(self) -> str:
        return "Webhook"

    @staticmethod
    def build_payload(prompt: str) -> dict[str, str]:
        return {"prompt": prompt, "message": prompt}

    async def send(self, prompt: str) -> dict[str, Any]:
        self._debug("debug", f"POST {self._url} ({len(prompt)} chars)")
        try:
            response = await self._client.post(
                self._url,
                content=json.dumps(self.build_payload(prompt)),
                headers=self._headers,
            )
        except httpx.HTTPError as e:
            self._debug("error", f"Transport failure: {e!r}")
            raise ResponderTransportError(str(e) or type(e).__name__) from e

        self._debug("debug", f"Status {response.status_code}, {len(response.content)} bytes")
        if not response.is_success:
            raise ResponderHTTPError(response.status_code)

        return self.parse_body(response.text)

    @staticmethod
    def parse_body(text: str) -> dict[str, Any]:
        """Parse a success body into a JSON object.

        Raises:
            EmptyResponseError: If the body is empty or whitespace
            MalformedResponseError: If the body is not a JSON object
        """
        if not text or not text.strip():
            raise EmptyResponseError()
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedResponseError() from e
        if not isinstance(data, dict):
            raise MalformedResponseError()
        return data

    async def close(self) -> None:
        """Close the HTTP client if this responder created it."""
        if self._owns_client:
            await self._client.aclose()
