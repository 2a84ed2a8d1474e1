"""Response normalizer - pulls translation text out of provider replies.

Provider reply shapes vary and are only loosely documented, so every function here is
total: any JSON-shaped input yields a string, possibly empty.
"""
import logging
from enum import Enum
from typing import Any, List

logger = logging.getLogger(__name__)

# Nested content deeper than this is treated as carrying no text
MAX_CONTENT_DEPTH = 32


class ContentShape(str, Enum):
    """Known shapes of a message ``content`` value."""
    TEXT = "text"        # "Hello"
    PARTS = "parts"      # ["Hello", {"type": "text", "text": "world"}]
    OBJECT = "object"    # {"text": "Hello"} or {"content": ...}
    UNKNOWN = "unknown"  # null, numbers, bools


def classify_content(value: Any) -> ContentShape:
    """Classify a content value into one of the known shapes."""
    if isinstance(value, str):
        return ContentShape.TEXT
    if isinstance(value, (list, tuple)):
        return ContentShape.PARTS
    if isinstance(value, dict):
        return ContentShape.OBJECT
    return ContentShape.UNKNOWN


def _object_text(value: dict, depth: int) -> str:
    text = value.get("text")
    if isinstance(text, str):
        return text
    if "content" in value:
        return extract_text_content(value["content"], depth + 1)
    return ""


def extract_text_content(value: Any, depth: int = 0) -> str:
    """
    Extract plain text from a content value of any known shape.

    Text-bearing parts are joined with single spaces and the result is trimmed.
    Parts without text (tool calls, images, thinking blocks) are skipped.

    Args:
        value: Content value from a provider reply
        depth: Current nesting level; content nested deeper than
            MAX_CONTENT_DEPTH yields an empty string

    Returns:
        Extracted text, or an empty string
    """
    if depth > MAX_CONTENT_DEPTH:
        return ""

    shape = classify_content(value)

    if shape is ContentShape.TEXT:
        return value.strip()

    if shape is ContentShape.OBJECT:
        return _object_text(value, depth).strip()

    if shape is ContentShape.PARTS:
        texts: List[str] = []
        for part in value:
            if isinstance(part, str):
                text = part
            elif isinstance(part, dict):
                text = _object_text(part, depth)
            else:
                continue
            if text:
                texts.append(text)
        return " ".join(texts).strip()

    return ""


def _first_choice(payload: Any) -> dict:
    if not isinstance(payload, dict):
        return {}
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices:
        return {}
    choice = choices[0]
    return choice if isinstance(choice, dict) else {}


def extract_xai_text(payload: Any) -> str:
    """
    Extract translation text from an xAI chat completions reply.

    xAI response format (OpenAI-compatible):
    {
        "choices": [{"message": {"role": "assistant", "content": "..."}}]
    }

    Falls back to the legacy ``choices[0].text`` field.
    """
    choice = _first_choice(payload)
    message = choice.get("message")
    if isinstance(message, dict):
        text = extract_text_content(message.get("content"))
        if text:
            return text
    return extract_text_content(choice.get("text"))


def extract_anthropic_text(payload: Any) -> str:
    """
    Extract translation text from an Anthropic messages reply.

    Anthropic response format:
    {
        "content": [{"type": "text", "text": "..."}],
        "stop_reason": "end_turn"
    }
    """
    if not isinstance(payload, dict):
        return ""
    text = extract_text_content(payload.get("content"))
    if not text and payload.get("content"):
        logger.debug(f"Anthropic: no text blocks in content of type {type(payload.get('content')).__name__}")
    return text
