"""Error taxonomy for the translation gateway.

Every failure carries two audiences: ``public_message`` is safe to return to the
caller, ``details`` is operator-side diagnostic payload that is only ever logged.
"""
from typing import Any, Optional

DEFAULT_ERROR_MESSAGE = "Translation failed."
DEFAULT_ERROR_STATUS = 502
MALFORMED_BODY_MESSAGE = "Malformed JSON body."


class TranslationError(Exception):
    """Base exception for translation failures."""

    status_code: int = DEFAULT_ERROR_STATUS

    def __init__(
        self,
        public_message: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Any] = None
    ):
        self.public_message = public_message or DEFAULT_ERROR_MESSAGE
        if status_code is not None:
            self.status_code = status_code
        self.details = details
        super().__init__(self.public_message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code!r}, "
            f"public_message={self.public_message!r}, details={self.details!r})"
        )


class ValidationError(TranslationError):
    """The caller sent an unusable request."""

    status_code = 400


class ConfigurationError(TranslationError):
    """A backend is missing a deployment secret."""

    status_code = 500


class ProviderError(TranslationError):
    """The upstream backend failed or returned nothing usable."""

    def __init__(
        self,
        public_message: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
        reason: str = "upstream_status"
    ):
        super().__init__(public_message, status_code, details)
        # upstream_status | empty_translation | timeout | network
        self.reason = reason


def resolve_status_code(error: BaseException) -> int:
    """Return the HTTP status carried by an error, or 502 when it has none.

    Only real integers in the HTTP range count; bools and strings are ignored.
    """
    code = getattr(error, "status_code", None)
    if isinstance(code, int) and not isinstance(code, bool) and 100 <= code <= 599:
        return code
    return DEFAULT_ERROR_STATUS


def resolve_public_message(error: BaseException) -> str:
    """Return the caller-safe message of an error."""
    message = getattr(error, "public_message", None)
    if isinstance(message, str) and message.strip():
        return message
    return DEFAULT_ERROR_MESSAGE
