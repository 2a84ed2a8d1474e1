"""Provider abstraction and response normalization for the translation gateway."""
from translate_gateway.services.gateway.errors import (
    ConfigurationError,
    ProviderError,
    TranslationError,
    ValidationError,
)
from translate_gateway.services.gateway.orchestrator import TranslationOrchestrator
from translate_gateway.services.gateway.registry import ProviderId, ProviderRegistry, build_registry

__all__ = [
    "ConfigurationError",
    "ProviderError",
    "TranslationError",
    "ValidationError",
    "TranslationOrchestrator",
    "ProviderId",
    "ProviderRegistry",
    "build_registry",
]
