"""Provider clients for the translation gateway."""
from translate_gateway.services.gateway.providers.base import BaseProvider
from translate_gateway.services.gateway.providers.xai import XAIProvider
from translate_gateway.services.gateway.providers.anthropic import AnthropicProvider

__all__ = [
    "BaseProvider",
    "XAIProvider",
    "AnthropicProvider",
]
