# =============================================================================
# llm_gateway/llms/errors.py — Exception hierarchy for generation failures
# =============================================================================
# Every error carries the HTTP status the /api/llm endpoint answers with.
# Rate limiting is not a class of its own: see is_rate_limited().
# =============================================================================


class LLMError(Exception):
    """Base class for all gateway errors."""

    status_code: int = 500

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(LLMError):
    status_code = 400


class UnknownProviderError(InvalidRequestError):
    def __init__(self, provider: object) -> None:
        super().__init__(f"Unknown provider: {provider}")
        self.provider = provider


class UnknownModelError(InvalidRequestError):
    def __init__(self, provider: str, model: object) -> None:
        super().__init__(f"Unsupported model for {provider}: {model}")
        self.provider = provider
        self.model = model


class ProviderConfigError(LLMError):
    """A credential or setting required by the provider is missing."""


class ProviderResponseError(LLMError):
    """The provider answered but the response held no usable text."""


class PromptBlockedError(ProviderResponseError):
    def __init__(self, block_reason: str) -> None:
        super().__init__(f"Google AI blocked the request ({block_reason})")
        self.block_reason = block_reason


class ProviderHTTPError(LLMError):
    """Non-2xx answer or transport failure talking to the provider."""

    def __init__(self, message: str, http_status: int | None = None) -> None:
        super().__init__(message)
        self.http_status = http_status


class ProviderTimeoutError(LLMError):
    def __init__(self, timeout: float) -> None:
        super().__init__(f"LLM generation timed out after {timeout:g}s")
        self.timeout = timeout


RATE_LIMIT_MARKER = "429"


def is_rate_limited(exc: BaseException) -> bool:
    # Substring match on the message is loose: any message mentioning 429 counts.
    if isinstance(exc, ProviderHTTPError) and exc.http_status == 429:
        return True
    return RATE_LIMIT_MARKER in str(exc)
