from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from llm_gateway.core.providers import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    MODEL_MAPS,
    PROVIDER_DEFAULT_MODELS,
    SUPPORTED_PROVIDERS,
    ProviderName,
)
from llm_gateway.llms.errors import InvalidRequestError, UnknownModelError, UnknownProviderError

PROMPT_REQUIRED = "Prompt is required"


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: str = Field(..., min_length=1)
    provider: ProviderName
    model: str = ""  # empty = provider default
    temperature: float = Field(DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    max_tokens: int = Field(DEFAULT_MAX_TOKENS, ge=1, alias="maxTokens")


def validate_request(body: Any) -> GenerateRequest:
    """Check a decoded JSON body and turn it into a GenerateRequest.

    The prompt is checked first so that a missing prompt always yields the
    same message whatever else is wrong with the body.
    """
    if not isinstance(body, dict):
        raise InvalidRequestError("Request body must be a JSON object")

    prompt = body.get("prompt")
    if not isinstance(prompt, str) or not prompt.strip():
        raise InvalidRequestError(PROMPT_REQUIRED)

    provider = body.get("provider")
    if provider not in SUPPORTED_PROVIDERS:
        raise UnknownProviderError(provider)

    model = body.get("model") or PROVIDER_DEFAULT_MODELS[provider]
    if not isinstance(model, str) or model not in MODEL_MAPS[provider]:
        raise UnknownModelError(provider, model)

    fields = {k: v for k, v in body.items() if v is not None}
    fields["model"] = model
    try:
        return GenerateRequest.model_validate(fields)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ())) or "body"
        raise InvalidRequestError(f"Invalid {field}: {err.get('msg', 'invalid value')}") from None
