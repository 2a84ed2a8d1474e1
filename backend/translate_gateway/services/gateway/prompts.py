"""System prompt construction."""
import json
from typing import Any, Mapping, Optional

TRANSLATION_INSTRUCTION = (
    "You are a professional translator. Translate the user's message into natural, "
    "fluent English unless the provided context asks for another target language. "
    "Preserve meaning, tone, names and formatting. Respond with the translation only, "
    "without explanations, notes or surrounding quotation marks."
)


def build_system_prompt(metadata: Optional[Mapping[str, Any]] = None) -> str:
    """
    Build the system instruction for a translation request.

    Non-empty metadata is appended as JSON so the model can use it as context.

    Args:
        metadata: Optional caller-supplied context (languages, domain, tone...)

    Returns:
        System prompt string
    """
    if not metadata:
        return TRANSLATION_INSTRUCTION

    serialized = json.dumps(dict(metadata), ensure_ascii=False, indent=2, sort_keys=True, default=str)
    return f"{TRANSLATION_INSTRUCTION}\n\nContext metadata (JSON):\n{serialized}"
