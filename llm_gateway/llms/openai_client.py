import httpx

from llm_gateway.core.config import get_settings
from llm_gateway.core.providers import OPENAI_MODEL_MAP
from llm_gateway.core.security import require_openai_key
from llm_gateway.llms.base import BaseLLM, error_message_from_body
from llm_gateway.llms.errors import ProviderHTTPError, ProviderResponseError, UnknownModelError


def _first_choice_content(data: object) -> str | None:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None


class OpenAIClient(BaseLLM):
    async def generate(self, prompt: str, model: str, temperature: float, max_tokens: int) -> str:
        key = require_openai_key()
        if model not in OPENAI_MODEL_MAP:
            raise UnknownModelError("openai", model)
        client = await self._get_client()
        base = get_settings().openai_base_url.rstrip("/")
        try:
            r = await client.post(
                f"{base}/chat/completions",
                headers={"Authorization": f"Bearer {key}"},
                json={
                    "model": OPENAI_MODEL_MAP[model],
                    "messages": [{"role": "user", "content": prompt}],
                    "temperature": temperature,
                    "max_tokens": max_tokens,
                },
            )
        except httpx.RequestError as e:
            raise ProviderHTTPError(f"OpenAI API unreachable: {e!s}") from e
        if r.is_error:
            message = error_message_from_body(r) or f"OpenAI API error: {r.status_code}"
            raise ProviderHTTPError(message, r.status_code)
        try:
            data = r.json()
        except ValueError as e:
            raise ProviderResponseError("No text in OpenAI response") from e
        text = _first_choice_content(data)
        if not text:
            raise ProviderResponseError("No text in OpenAI response")
        return text
