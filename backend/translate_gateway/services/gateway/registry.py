"""Provider registry - maps provider identifiers to provider clients."""
import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple
import httpx
from translate_gateway.core.config import Settings
from translate_gateway.models.provider import ProviderId
from translate_gateway.services.gateway.providers import AnthropicProvider, BaseProvider, XAIProvider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Immutable lookup table from provider identifier to provider client.

    Built once at start-up and only read afterwards, so it can be shared by
    any number of concurrent requests.
    """

    def __init__(self, providers: Mapping[str, BaseProvider], default_identifier: str):
        """
        Initialize registry.

        Args:
            providers: Provider clients keyed by identifier, in registration order
            default_identifier: Identifier used when the caller names none

        Raises:
            ValueError: If the registry is empty or the default is not registered
        """
        normalized: Dict[str, BaseProvider] = {}
        for identifier, provider in providers.items():
            normalized[str(identifier).strip().lower()] = provider
        if not normalized:
            raise ValueError("Provider registry requires at least one provider")

        default = (default_identifier or "").strip().lower()
        if default not in normalized:
            raise ValueError(
                f"Default provider '{default_identifier}' is not registered. "
                f"Registered providers: {', '.join(normalized)}"
            )

        self._providers = MappingProxyType(normalized)
        self._default_identifier = default

    @property
    def identifiers(self) -> Tuple[str, ...]:
        """Registered identifiers in registration order."""
        return tuple(self._providers)

    @property
    def default_identifier(self) -> str:
        return self._default_identifier

    @property
    def providers(self) -> Mapping[str, BaseProvider]:
        return self._providers

    def resolve(self, identifier: str) -> Optional[BaseProvider]:
        """
        Look up a provider client.

        Args:
            identifier: Provider identifier (case-insensitive)

        Returns:
            Provider client, or None if the identifier is not registered
        """
        if not isinstance(identifier, str):
            return None
        return self._providers.get(identifier.strip().lower())

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.resolve(identifier) is not None

    def __len__(self) -> int:
        return len(self._providers)


def build_registry(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> ProviderRegistry:
    """
    Build the provider registry from settings.

    Args:
        settings: Application settings shared by reference with every provider
        transport: Optional httpx transport for all providers (used by tests)

    Returns:
        ProviderRegistry with claude and xai registered
    """
    providers: Dict[str, BaseProvider] = {
        ProviderId.CLAUDE.value: AnthropicProvider(settings, transport=transport),
        ProviderId.XAI.value: XAIProvider(settings, transport=transport),
    }
    registry = ProviderRegistry(providers, settings.DEFAULT_PROVIDER)

    configured = [pid for pid, provider in providers.items() if provider.is_configured]
    logger.info(
        f"Provider registry built: providers={list(registry.identifiers)}, "
        f"default={registry.default_identifier}, configured={configured}"
    )
    return registry
