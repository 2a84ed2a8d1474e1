"""Pytest configuration and fixtures."""
import os

# Keep test runs from writing rotating log files
os.environ.setdefault("LOG_TO_FILE", "false")

from typing import Any, Callable, List, Optional  # noqa: E402
import httpx  # noqa: E402
import pytest  # noqa: E402
from translate_gateway.core.config import Settings  # noqa: E402
from translate_gateway.services.gateway.registry import ProviderRegistry  # noqa: E402


@pytest.fixture
def settings():
    """Settings with both providers configured, independent of the process environment."""
    return Settings(
        _env_file=None,
        XAI_API_KEY="xai-test-key",
        XAI_MODEL="grok-test",
        ANTHROPIC_API_KEY="anthropic-test-key",
        ANTHROPIC_MODEL="claude-test",
        DEFAULT_PROVIDER="xai",
        LOG_TO_FILE=False,
    )


@pytest.fixture
def unconfigured_settings():
    """Settings with no provider credentials."""
    return Settings(
        _env_file=None,
        XAI_API_KEY="",
        ANTHROPIC_API_KEY="",
        DEFAULT_PROVIDER="xai",
        LOG_TO_FILE=False,
    )


@pytest.fixture
def mock_transport():
    """Factory for an httpx.MockTransport that records outbound requests.

    Returns (transport, requests). Pass ``error`` as a callable taking the
    request and returning an exception to simulate network failures.
    """
    def factory(
        status_code: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        error: Optional[Callable[[httpx.Request], Exception]] = None,
    ):
        requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if error is not None:
                raise error(request)
            if json_body is not None:
                return httpx.Response(status_code, json=json_body)
            return httpx.Response(status_code, text=text or "")

        return httpx.MockTransport(handler), requests

    return factory


class FakeProvider:
    """Stand-in provider client that records calls."""

    def __init__(self, identifier: str, result: str = "Hello", error: Optional[BaseException] = None):
        self.identifier = identifier
        self.result = result
        self.error = error
        self.calls: List[dict] = []
        self.is_configured = True

    async def translate(self, prompt, metadata=None):
        self.calls.append({"prompt": prompt, "metadata": metadata})
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_providers():
    """Fake claude and xai providers keyed by identifier."""
    return {
        "claude": FakeProvider("claude", result="Hello from Claude"),
        "xai": FakeProvider("xai", result="Hello"),
    }


@pytest.fixture
def fake_registry(fake_providers):
    """Registry over the fake providers with xai as default."""
    return ProviderRegistry(fake_providers, "xai")
