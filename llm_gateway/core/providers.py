from types import MappingProxyType
from typing import Literal

ProviderName = Literal["google", "openai"]

SUPPORTED_PROVIDERS: tuple[str, ...] = ("google", "openai")

# Logical model name -> provider model ID
GOOGLE_MODEL_MAP = MappingProxyType({
    "gemini-2.5-flash": "gemini-2.5-flash",
    "gemini-3-pro-preview": "gemini-3-pro-preview",
})

OPENAI_MODEL_MAP = MappingProxyType({
    "gpt-4.1-mini": "gpt-4.1-mini",
    "gpt-4.1-nano": "gpt-4.1-nano",
})

MODEL_MAPS = MappingProxyType({
    "google": GOOGLE_MODEL_MAP,
    "openai": OPENAI_MODEL_MAP,
})

PROVIDER_DEFAULT_MODELS = MappingProxyType({
    "google": "gemini-2.5-flash",
    "openai": "gpt-4.1-mini",
})

GOOGLE_MAX_OUTPUT_TOKENS = 8192
GOOGLE_MAX_ATTEMPTS = 2

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1024
