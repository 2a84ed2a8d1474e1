"""xAI (Grok) provider - OpenAI-compatible chat completions."""
from typing import Any, Dict, Tuple
from translate_gateway.services.gateway.normalizer import extract_xai_text
from translate_gateway.services.gateway.providers.base import BaseProvider

XAI_CHAT_COMPLETIONS_URL = "https://api.x.ai/v1/chat/completions"


class XAIProvider(BaseProvider):
    """Provider client for the xAI chat completions API."""

    identifier = "xai"
    display_name = "xAI"
    api_key_setting = "XAI_API_KEY"

    def transform_request(
        self,
        prompt: str,
        system_prompt: str,
        api_key: str
    ) -> Tuple[str, Dict[str, Any], Dict[str, str]]:
        """
        Build an xAI chat completions request.

        xAI format:
        {
            "model": "grok-2-latest",
            "messages": [
                {"role": "system", "content": "..."},
                {"role": "user", "content": "..."}
            ],
            "temperature": 0.2,
            "max_tokens": 1024
        }
        """
        payload = {
            "model": self.settings.XAI_MODEL,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.settings.XAI_TEMPERATURE,
            "max_tokens": self.settings.XAI_MAX_TOKENS,
        }
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        return XAI_CHAT_COMPLETIONS_URL, payload, headers

    def extract_translation(self, payload: Any) -> str:
        return extract_xai_text(payload)
