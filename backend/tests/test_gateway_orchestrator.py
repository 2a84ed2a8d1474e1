"""Tests for the translation request orchestrator."""
import logging
import pytest
from translate_gateway.services.gateway.errors import (
    ConfigurationError,
    ProviderError,
    TranslationError,
    ValidationError,
)
from translate_gateway.services.gateway.orchestrator import MISSING_PROMPT_MESSAGE, TranslationOrchestrator


@pytest.fixture
def orchestrator(fake_registry):
    return TranslationOrchestrator(fake_registry)


# ===== Validation =====

@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    None,
    {},
    {"prompt": ""},
    {"prompt": "   \n\t"},
    {"prompt": 42},
    {"prompt": ["Bonjour"]},
    {"prompt": None, "provider": "claude"},
])
async def test_missing_prompt(orchestrator, fake_providers, body):
    """Test empty, missing and non-string prompts are rejected without dispatch."""
    with pytest.raises(ValidationError) as exc_info:
        await orchestrator.translate(body)

    assert exc_info.value.status_code == 400
    assert exc_info.value.public_message == MISSING_PROMPT_MESSAGE
    assert all(not provider.calls for provider in fake_providers.values())


@pytest.mark.asyncio
async def test_unsupported_provider(orchestrator, fake_providers):
    """Test unknown providers are rejected with the registered list."""
    with pytest.raises(ValidationError) as exc_info:
        await orchestrator.translate({"prompt": "Hi", "provider": "unknown"})

    assert exc_info.value.status_code == 400
    assert exc_info.value.public_message == 'Unsupported provider "unknown". Use one of: claude, xai.'
    assert all(not provider.calls for provider in fake_providers.values())


def test_validate_cleans_request(orchestrator):
    """Test validation trims the prompt and lower-cases the provider."""
    request = orchestrator.validate({"prompt": "  Bonjour  ", "provider": " CLAUDE ", "metadata": {"tone": "casual"}})
    assert request.prompt == "Bonjour"
    assert request.provider == "claude"
    assert request.metadata == {"tone": "casual"}


@pytest.mark.parametrize("provider", [None, "", "   "])
def test_validate_defaults_provider(orchestrator, provider):
    """Test omitted and blank providers resolve to the default."""
    request = orchestrator.validate({"prompt": "Bonjour", "provider": provider})
    assert request.provider == "xai"


@pytest.mark.asyncio
@pytest.mark.parametrize("provider,shown", [(5, "5"), (True, "true"), (1.5, "1.5")])
async def test_non_string_provider_is_coerced(orchestrator, fake_providers, provider, shown):
    """Test non-string providers are coerced to strings and rejected when unknown."""
    with pytest.raises(ValidationError) as exc_info:
        await orchestrator.translate({"prompt": "Hi", "provider": provider})

    assert exc_info.value.public_message == f'Unsupported provider "{shown}". Use one of: claude, xai.'
    assert all(not fake.calls for fake in fake_providers.values())


@pytest.mark.parametrize("metadata", [None, "context", ["a"], 3])
def test_validate_non_object_metadata_is_empty(orchestrator, metadata):
    """Test non-object metadata is replaced by an empty mapping."""
    request = orchestrator.validate({"prompt": "Bonjour", "metadata": metadata})
    assert request.metadata == {}


# ===== Dispatch =====

@pytest.mark.asyncio
async def test_dispatch_to_default(orchestrator, fake_providers):
    """Test a request without provider goes to the default backend only."""
    result = await orchestrator.translate({"prompt": "  Bonjour "})

    assert result.translation == "Hello"
    assert result.prompt == "Bonjour"
    assert fake_providers["xai"].calls == [{"prompt": "Bonjour", "metadata": {}}]
    assert fake_providers["claude"].calls == []


@pytest.mark.asyncio
async def test_dispatch_case_insensitive(orchestrator, fake_providers):
    """Test mixed-case provider names dispatch to the matching backend."""
    result = await orchestrator.translate({"prompt": "Bonjour", "provider": "Claude", "metadata": {"to": "en"}})

    assert result.translation == "Hello from Claude"
    assert fake_providers["claude"].calls == [{"prompt": "Bonjour", "metadata": {"to": "en"}}]
    assert fake_providers["xai"].calls == []


# ===== Failures =====

@pytest.mark.asyncio
async def test_provider_error_is_logged_and_reraised(orchestrator, fake_providers, caplog):
    """Test provider failures are logged with provider and details, then re-raised."""
    fake_providers["xai"].error = ProviderError(
        "xAI API request failed with status 503.", status_code=503, details={"error": "overloaded"}
    )
    caplog.set_level(logging.INFO)

    with pytest.raises(ProviderError) as exc_info:
        await orchestrator.translate({"prompt": "Bonjour"})

    assert exc_info.value.status_code == 503
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors
    assert "provider=xai" in errors[0].getMessage()
    assert "overloaded" in errors[0].getMessage()


@pytest.mark.asyncio
async def test_configuration_error_passes_through(orchestrator, fake_providers):
    """Test configuration errors keep their 500 status."""
    fake_providers["claude"].error = ConfigurationError("Claude provider is not configured.")

    with pytest.raises(ConfigurationError) as exc_info:
        await orchestrator.translate({"prompt": "Bonjour", "provider": "claude"})

    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_unexpected_error_becomes_provider_error(orchestrator, fake_providers):
    """Test unexpected exceptions are wrapped with default status and message."""
    fake_providers["xai"].error = RuntimeError("socket exploded")

    with pytest.raises(ProviderError) as exc_info:
        await orchestrator.translate({"prompt": "Bonjour"})

    assert exc_info.value.status_code == 502
    assert exc_info.value.public_message == "Translation failed."
    assert "socket exploded" not in exc_info.value.public_message
    assert exc_info.value.reason == "unexpected"


@pytest.mark.asyncio
async def test_unexpected_error_keeps_valid_status(orchestrator, fake_providers):
    """Test a foreign exception carrying a valid status code keeps it."""
    error = RuntimeError("teapot")
    error.status_code = 418
    fake_providers["xai"].error = error

    with pytest.raises(ProviderError) as exc_info:
        await orchestrator.translate({"prompt": "Bonjour"})

    assert exc_info.value.status_code == 418


@pytest.mark.asyncio
async def test_ill_formed_status_code_defaults_to_502(orchestrator, fake_providers):
    """Test errors whose status code is not a valid integer resolve to 502."""
    from translate_gateway.services.gateway.errors import resolve_status_code

    fake_providers["xai"].error = TranslationError("boom", status_code="oops")

    with pytest.raises(TranslationError) as exc_info:
        await orchestrator.translate({"prompt": "Bonjour"})

    assert resolve_status_code(exc_info.value) == 502
