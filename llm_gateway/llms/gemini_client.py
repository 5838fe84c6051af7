# =============================================================================
# llm_gateway/llms/gemini_client.py — Google Gemini generateContent client
# =============================================================================
# Uses GEMINI_API_KEY. Models: gemini-2.5-flash, gemini-3-pro-preview.
# Output budget is capped at 8192 tokens. An empty answer cut off by MAX_TOKENS
# is retried once with a doubled budget; nothing else is retried.
# =============================================================================

import json
from dataclasses import dataclass
from typing import Any, Union

import httpx

from llm_gateway.core.config import get_settings
from llm_gateway.core.providers import GOOGLE_MAX_ATTEMPTS, GOOGLE_MAX_OUTPUT_TOKENS, GOOGLE_MODEL_MAP
from llm_gateway.core.security import require_gemini_key
from llm_gateway.llms.base import BaseLLM, error_message_from_body
from llm_gateway.llms.errors import (
    PromptBlockedError,
    ProviderHTTPError,
    ProviderResponseError,
    UnknownModelError,
)
from llm_gateway.utils.logger import logger

FINISH_REASON_MAX_TOKENS = "MAX_TOKENS"


@dataclass(frozen=True)
class CandidateText:
    text: str


@dataclass(frozen=True)
class PromptBlocked:
    block_reason: str
    finish_reason: str | None = None


@dataclass(frozen=True)
class FinishedWithoutText:
    finish_reason: str


@dataclass(frozen=True)
class EmptyResponse:
    pass


GeminiResult = Union[CandidateText, PromptBlocked, FinishedWithoutText, EmptyResponse]


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def decode_gemini_response(data: Any) -> GeminiResult:
    """Classify a generateContent body into exactly one result variant.

    Candidates are scanned in order; the first one whose parts join to
    non-blank text wins. A top-level ``text`` field is the fallback. Only when
    both are empty do finish and block reasons matter.
    """
    body = _as_dict(data)
    root = _as_dict(body["response"]) if isinstance(body.get("response"), dict) else body
    candidates = _as_list(root.get("candidates"))

    for candidate in candidates:
        parts = _as_list(_as_dict(_as_dict(candidate).get("content")).get("parts"))
        combined = "".join(
            part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)
        ).strip()
        if combined:
            return CandidateText(combined)

    direct = _non_empty_str(body.get("text"))
    if direct:
        return CandidateText(direct.strip())

    first = _as_dict(candidates[0]) if candidates else {}
    finish_reason = _non_empty_str(first.get("finishReason"))
    block_reason = _non_empty_str(_as_dict(root.get("promptFeedback")).get("blockReason"))

    if block_reason:
        return PromptBlocked(block_reason=block_reason, finish_reason=finish_reason)
    if finish_reason:
        return FinishedWithoutText(finish_reason=finish_reason)
    return EmptyResponse()


def is_truncated(result: GeminiResult) -> bool:
    if isinstance(result, (PromptBlocked, FinishedWithoutText)):
        return result.finish_reason == FINISH_REASON_MAX_TOKENS
    return False


def _resolve_gemini_model(model: str) -> str:
    try:
        return GOOGLE_MODEL_MAP[model]
    except KeyError:
        raise UnknownModelError("google", model) from None


class GeminiClient(BaseLLM):
    async def _generate_once(
        self,
        key: str,
        model_id: str,
        prompt: str,
        temperature: float,
        max_output_tokens: int,
    ) -> Any:
        client = await self._get_client()
        base = get_settings().gemini_base_url.rstrip("/")
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": temperature,
                "maxOutputTokens": max_output_tokens,
            },
        }
        try:
            r = await client.post(
                f"{base}/models/{model_id}:generateContent",
                headers={"x-goog-api-key": key},
                json=payload,
            )
        except httpx.RequestError as e:
            raise ProviderHTTPError(f"Google AI API unreachable: {e!s}") from e
        if r.is_error:
            detail = error_message_from_body(r) or (r.text or "")[:500]
            message = f"Google AI API error {r.status_code}"
            raise ProviderHTTPError(f"{message}: {detail}" if detail else message, r.status_code)
        try:
            return r.json()
        except ValueError as e:
            raise ProviderResponseError("Google AI returned a non-JSON response") from e

    async def generate(self, prompt: str, model: str, temperature: float, max_tokens: int) -> str:
        key = require_gemini_key()
        model_id = _resolve_gemini_model(model)
        target_tokens = min(max_tokens, GOOGLE_MAX_OUTPUT_TOKENS)

        for attempt in range(GOOGLE_MAX_ATTEMPTS):
            data = await self._generate_once(key, model_id, prompt, temperature, target_tokens)
            result = decode_gemini_response(data)
            if isinstance(result, CandidateText):
                return result.text

            if is_truncated(result) and target_tokens < GOOGLE_MAX_OUTPUT_TOKENS:
                next_tokens = min(GOOGLE_MAX_OUTPUT_TOKENS, target_tokens * 2)
                if attempt + 1 < GOOGLE_MAX_ATTEMPTS:
                    logger.info(
                        "gemini_truncated_retry",
                        extra={"attempt": attempt + 1, "max_output_tokens": target_tokens, "next_max_output_tokens": next_tokens},
                    )
                target_tokens = next_tokens
                continue

            if not get_settings().is_production:
                try:
                    dump = json.dumps(data, indent=2)
                except (TypeError, ValueError):
                    dump = repr(data)
                logger.warning("gemini_empty_response", extra={"model": model_id, "response": dump})

            if isinstance(result, PromptBlocked):
                raise PromptBlockedError(result.block_reason)
            if isinstance(result, FinishedWithoutText):
                raise ProviderResponseError(f"No text in Google AI response (finish reason: {result.finish_reason})")
            raise ProviderResponseError("No text in Google AI response")

        logger.warning("gemini_retries_exhausted", extra={"model": model_id, "attempts": GOOGLE_MAX_ATTEMPTS})
        raise ProviderResponseError("No text in Google AI response (exhausted retries)")
