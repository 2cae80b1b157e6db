"""HTTP client for the upstream chat-completion API."""
from typing import Any

import httpx


COMPLETIONS_PATH = "/chat/completions"
REQUEST_TIMEOUT = 30.0


class CompletionClient:
    """Posts chat-completion requests to an OpenAI-compatible API.

    A fresh ``httpx.AsyncClient`` is opened per call. ``transport`` lets
    callers substitute the network layer (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def create(self, payload: dict[str, Any]) -> tuple[int, dict[str, Any] | None]:
        """Send one chat-completion request.

        Args:
            payload: Request body (model, messages, sampling parameters)

        Returns:
            Tuple of (status_code, response_json). ``response_json`` is None
            when the body is not a JSON object.

        Raises:
            httpx.InvalidURL: if the upstream URL cannot be used
            httpx.HTTPError: on transport failures and timeouts
        """
        url = f"{self.base_url}{COMPLETIONS_PATH}"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(
                url,
                headers=headers,
                json=payload,
                timeout=self.timeout,
            )

            try:
                response_data = response.json()
            except ValueError:
                response_data = None

            if not isinstance(response_data, dict):
                response_data = None

            return response.status_code, response_data
