"""Base provider client interface."""
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Tuple
import httpx
from translate_gateway.core.config import Settings
from translate_gateway.services.gateway.errors import ConfigurationError, ProviderError
from translate_gateway.services.gateway.prompts import build_system_prompt

logger = logging.getLogger(__name__)


def parse_response_body(text: str) -> Any:
    """Parse a response body as JSON, wrapping non-JSON text as ``{"raw": text}``."""
    try:
        return json.loads(text)
    except ValueError:
        return {"raw": text}


class BaseProvider(ABC):
    """Base class for provider clients.

    Subclasses describe one backend: how to read its credential, how to shape
    the outbound request and how to pull text out of the reply. Sending the
    request and mapping failures is shared.
    """

    identifier: str = ""
    display_name: str = ""
    api_key_setting: str = ""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize provider client.

        Args:
            settings: Application settings, read at call time
            transport: Optional httpx transport (used by tests)
        """
        self.settings = settings
        self._transport = transport

    @property
    def api_key(self) -> str:
        """Configured credential for this backend (empty when missing)."""
        return getattr(self.settings, self.api_key_setting, "") or ""

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @abstractmethod
    def transform_request(
        self,
        prompt: str,
        system_prompt: str,
        api_key: str
    ) -> Tuple[str, Dict[str, Any], Dict[str, str]]:
        """
        Build the provider-specific request.

        Args:
            prompt: Cleaned user prompt
            system_prompt: System instruction
            api_key: Backend credential

        Returns:
            Tuple of (url, payload, headers)
        """
        pass

    @abstractmethod
    def extract_translation(self, payload: Any) -> str:
        """Extract translation text from a successful reply (never raises)."""
        pass

    def failure_message(self, status_code: int) -> str:
        """Caller-safe message for a non-2xx upstream status."""
        if status_code in (401, 403):
            return f"{self.display_name} API rejected the configured credentials (status {status_code})."
        if status_code == 429:
            return f"{self.display_name} API rate limit exceeded (status {status_code})."
        return f"{self.display_name} API request failed with status {status_code}."

    async def translate(self, prompt: str, metadata: Optional[Mapping[str, Any]] = None) -> str:
        """
        Translate a prompt with this backend.

        Args:
            prompt: Cleaned, non-empty user prompt
            metadata: Optional context appended to the system prompt

        Returns:
            Trimmed, non-empty translation

        Raises:
            ConfigurationError: If the backend credential is missing
            ProviderError: If the call fails or yields no text
        """
        api_key = self.api_key
        if not api_key:
            raise ConfigurationError(
                f"{self.display_name} provider is not configured.",
                details={"missing_setting": self.api_key_setting}
            )

        url, payload, headers = self.transform_request(prompt, build_system_prompt(metadata), api_key)
        logger.info(f"Sending translation request to {self.identifier}: model={payload.get('model')}, prompt_chars={len(prompt)}")

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.UPSTREAM_TIMEOUT_SECONDS,
                transport=self._transport
            ) as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.TimeoutException as e:
            raise ProviderError(
                f"{self.display_name} API request timed out.",
                status_code=504,
                details={"url": url, "error": f"{type(e).__name__}: {e}"},
                reason="timeout"
            ) from e
        except httpx.RequestError as e:
            raise ProviderError(
                f"{self.display_name} API request could not be completed.",
                status_code=502,
                details={"url": url, "error": f"{type(e).__name__}: {e}"},
                reason="network"
            ) from e

        body = parse_response_body(response.text)

        if not response.is_success:
            raise ProviderError(
                self.failure_message(response.status_code),
                status_code=response.status_code,
                details=body,
                reason="upstream_status"
            )

        translation = self.extract_translation(body).strip()
        if not translation:
            raise ProviderError(
                f"{self.display_name} API returned no translation text.",
                status_code=502,
                details=body,
                reason="empty_translation"
            )

        logger.debug(f"Received translation from {self.identifier}: chars={len(translation)}")
        return translation
