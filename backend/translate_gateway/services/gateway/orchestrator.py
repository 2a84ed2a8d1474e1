"""Request orchestrator - validates, resolves the provider and dispatches."""
import logging
from typing import Any, Dict, Mapping
from translate_gateway.models.translation import TranslationRequest, TranslationResponse
from translate_gateway.services.gateway.errors import (
    ProviderError,
    TranslationError,
    ValidationError,
    resolve_public_message,
    resolve_status_code,
)
from translate_gateway.services.gateway.registry import ProviderRegistry

logger = logging.getLogger(__name__)

MISSING_PROMPT_MESSAGE = "Missing prompt text to translate."


def _as_clean_string(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _coerce_provider(value: Any) -> str:
    """Coerce a provider value to a trimmed string; only null counts as omitted."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).strip()


class TranslationOrchestrator:
    """Turns an inbound request body into a translation or a TranslationError."""

    def __init__(self, registry: ProviderRegistry):
        self.registry = registry

    def validate(self, body: Any) -> TranslationRequest:
        """
        Validate an inbound body and resolve its provider.

        Args:
            body: Parsed JSON body (None or a dict)

        Returns:
            TranslationRequest with cleaned prompt and resolved provider

        Raises:
            ValidationError: If the prompt is empty or the provider is unknown
        """
        data: Mapping[str, Any] = body if isinstance(body, Mapping) else {}

        prompt = _as_clean_string(data.get("prompt"))
        if not prompt:
            raise ValidationError(MISSING_PROMPT_MESSAGE)

        requested = _coerce_provider(data.get("provider"))
        if not requested:
            provider_id = self.registry.default_identifier
        else:
            provider_id = requested.lower()
            if self.registry.resolve(provider_id) is None:
                raise ValidationError(
                    f'Unsupported provider "{requested}". '
                    f"Use one of: {', '.join(self.registry.identifiers)}."
                )

        metadata = data.get("metadata")
        if metadata is not None and not isinstance(metadata, Mapping):
            logger.debug(f"Ignoring non-object metadata of type {type(metadata).__name__}")
        metadata_dict: Dict[str, Any] = dict(metadata) if isinstance(metadata, Mapping) else {}

        return TranslationRequest(provider=provider_id, prompt=prompt, metadata=metadata_dict)

    async def translate(self, body: Any) -> TranslationResponse:
        """
        Handle one translation request end to end.

        Args:
            body: Parsed JSON body

        Returns:
            TranslationResponse on success

        Raises:
            TranslationError: On any failure, after it has been logged
        """
        try:
            request = self.validate(body)
        except ValidationError as e:
            logger.info(f"Rejected translation request: {e.public_message}")
            raise

        provider = self.registry.resolve(request.provider)
        try:
            translation = await provider.translate(request.prompt, request.metadata)
        except TranslationError as e:
            logger.error(
                f"Translation failed: provider={request.provider}, "
                f"status={resolve_status_code(e)}, reason={getattr(e, 'reason', None)}, "
                f"error={e!r}"
            )
            raise
        except Exception as e:
            logger.error(
                f"Unexpected translation failure: provider={request.provider}, error={e!r}",
                exc_info=True
            )
            raise ProviderError(
                resolve_public_message(e),
                status_code=resolve_status_code(e),
                details={"error": f"{type(e).__name__}: {e}"},
                reason="unexpected"
            ) from e

        logger.info(f"Translation succeeded: provider={request.provider}, chars={len(translation)}")
        return TranslationResponse(translation=translation, prompt=request.prompt)
