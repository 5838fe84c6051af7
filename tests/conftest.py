"""
Pytest configuration and shared fixtures.
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from llm_gateway.core.config import get_settings
from llm_gateway.llms.errors import UnknownProviderError
from llm_gateway.llms.gemini_client import GeminiClient
from llm_gateway.llms.openai_client import OpenAIClient


# =============================================================================
# Settings fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    """Give every test both API keys and fresh cached settings."""
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini-key")
    monkeypatch.setenv("OPENAI_API_KEY", "test-openai-key")
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("GEMINI_BASE_URL", raising=False)
    monkeypatch.delenv("OPENAI_BASE_URL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Provider stubs
# =============================================================================

class RecordingTransport(httpx.MockTransport):
    """MockTransport that replays canned (status, json) pairs and records requests.

    The last canned response is repeated once the list runs out.
    """

    def __init__(self, responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self.responses)) - 1
        status, payload = self.responses[index]
        if isinstance(payload, (dict, list)):
            return httpx.Response(status, json=payload)
        return httpx.Response(status, text=payload or "")


@pytest.fixture
def stub_provider(monkeypatch):
    """Route the endpoint's provider clients through a RecordingTransport."""
    from llm_gateway.services import llm_service

    def install(*responses) -> RecordingTransport:
        transport = RecordingTransport(responses)

        def fake_get_client(provider):
            if provider == "google":
                return GeminiClient(transport=transport)
            if provider == "openai":
                return OpenAIClient(transport=transport)
            raise UnknownProviderError(provider)

        monkeypatch.setattr(llm_service, "get_client", fake_get_client)
        return transport

    return install


@pytest.fixture
def client():
    from llm_gateway.main import app
    return TestClient(app)

