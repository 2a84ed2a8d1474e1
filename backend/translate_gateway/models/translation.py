"""Translation request/response models."""
from dataclasses import dataclass, field
from typing import Any, Dict
from pydantic import BaseModel, Field


@dataclass(frozen=True)
class TranslationRequest:
    """Validated translation request."""
    provider: str  # Resolved, lower-case provider identifier
    prompt: str  # Trimmed, non-empty prompt
    metadata: Dict[str, Any] = field(default_factory=dict)


class TranslationResponse(BaseModel):
    """Successful translation payload."""
    translation: str = Field(..., description="Translated text")
    prompt: str = Field(..., description="The trimmed prompt that was translated")


class ErrorResponse(BaseModel):
    """Uniform error payload."""
    error: str = Field(..., description="Caller-safe error message")


class WebhookResponse(BaseModel):
    """Hello webhook reply."""
    text: str
