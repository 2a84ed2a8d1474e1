"""Provider identifiers."""
from enum import Enum


class ProviderId(str, Enum):
    """Caller-facing provider identifiers, in registration order."""
    CLAUDE = "claude"
    XAI = "xai"
