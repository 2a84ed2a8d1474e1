"""Anthropic (Claude) provider - Messages API."""
from typing import Any, Dict, Tuple
from translate_gateway.services.gateway.normalizer import extract_anthropic_text
from translate_gateway.services.gateway.providers.base import BaseProvider

ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"


class AnthropicProvider(BaseProvider):
    """Provider client for the Anthropic Messages API."""

    identifier = "claude"
    display_name = "Claude"
    api_key_setting = "ANTHROPIC_API_KEY"

    def transform_request(
        self,
        prompt: str,
        system_prompt: str,
        api_key: str
    ) -> Tuple[str, Dict[str, Any], Dict[str, str]]:
        """
        Build an Anthropic messages request.

        The system instruction goes in a top-level ``system`` field, not in
        the messages list.
        """
        payload = {
            "model": self.settings.ANTHROPIC_MODEL,
            "max_tokens": self.settings.ANTHROPIC_MAX_TOKENS,
            "temperature": self.settings.ANTHROPIC_TEMPERATURE,
            "system": system_prompt,
            "messages": [
                {"role": "user", "content": prompt}
            ],
        }
        headers = {
            "x-api-key": api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "Content-Type": "application/json",
        }
        return ANTHROPIC_MESSAGES_URL, payload, headers

    def extract_translation(self, payload: Any) -> str:
        return extract_anthropic_text(payload)
