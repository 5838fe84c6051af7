# =============================================================================
# llm_gateway/llms/router.py — Provider dispatch
# =============================================================================
# No fallback between providers: the caller names one and gets that one.
# =============================================================================

import asyncio
import time

from llm_gateway.core.config import get_settings
from llm_gateway.llms.base import BaseLLM
from llm_gateway.llms.errors import ProviderTimeoutError, UnknownProviderError
from llm_gateway.llms.gemini_client import GeminiClient
from llm_gateway.llms.openai_client import OpenAIClient
from llm_gateway.utils.logger import logger


def get_client(provider: str) -> BaseLLM:
    if provider == "google":
        return GeminiClient()
    if provider == "openai":
        return OpenAIClient()
    raise UnknownProviderError(provider)


async def generate_with_provider(
    client: BaseLLM,
    provider: str,
    model: str,
    prompt: str,
    temperature: float,
    max_tokens: int,
) -> tuple[str, float]:
    """Run one generation (retries included) under the request timeout.

    Returns the text and the latency in milliseconds. The client is closed
    whether or not the call succeeds.
    """
    timeout = get_settings().request_timeout
    start = time.perf_counter()
    try:
        text = await asyncio.wait_for(
            client.generate(prompt, model, temperature, max_tokens),
            timeout=timeout,
        )
    except asyncio.TimeoutError as e:
        raise ProviderTimeoutError(timeout) from e
    finally:
        try:
            await client.close()
        except Exception as e:
            logger.warning("client_close_failed", extra={"provider": provider, "error": str(e)})
    latency_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "llm_used",
        extra={"provider": provider, "model": model, "latency_ms": round(latency_ms, 2)},
    )
    return text, latency_ms
