from llm_gateway.core.config import get_settings
from llm_gateway.llms.errors import ProviderConfigError


def require_openai_key() -> str:
    key = get_settings().openai_api_key
    if not key or not key.strip():
        raise ProviderConfigError("OPENAI_API_KEY not configured")
    return key.strip()


def require_gemini_key() -> str:
    key = get_settings().gemini_api_key
    if not key or not key.strip():
        raise ProviderConfigError("GEMINI_API_KEY not configured")
    return key.strip()


def key_status(key: str) -> str:
    return "configured" if (key and key.strip()) else "missing_key"
