from abc import ABC, abstractmethod

import httpx

from llm_gateway.core.config import get_settings


class BaseLLM(ABC):
    """Provider client holding one lazily created httpx.AsyncClient."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._client: httpx.AsyncClient | None = None
        self._transport = transport

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=get_settings().request_timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    @abstractmethod
    async def generate(self, prompt: str, model: str, temperature: float, max_tokens: int) -> str:
        ...


def error_message_from_body(response: httpx.Response) -> str | None:
    """Pull ``error.message`` out of a provider error body, if there is one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None
