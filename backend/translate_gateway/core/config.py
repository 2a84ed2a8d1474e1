"""Application configuration."""
from pathlib import Path
from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from translate_gateway.models.provider import ProviderId

# Get the project root directory (3 levels up from this file: backend/translate_gateway/core/config.py)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE = PROJECT_ROOT / ".env"

KNOWN_PROVIDERS = tuple(provider.value for provider in ProviderId)


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "Translation Gateway"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # CORS - stored as string in env, converted to list
    CORS_ORIGINS: str = "*"

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        origins = [origin.strip() for origin in self.CORS_ORIGINS.split(',') if origin.strip()]
        return origins if origins else ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    LOG_DIR: str = str(PROJECT_ROOT / "logs")

    # Provider selection
    DEFAULT_PROVIDER: str = "xai"
    UPSTREAM_TIMEOUT_SECONDS: float = 60.0  # Outbound call timeout, no retries

    # xAI (Grok)
    XAI_API_KEY: str = ""
    XAI_MODEL: str = "grok-2-latest"
    XAI_TEMPERATURE: float = 0.2
    XAI_MAX_TOKENS: int = 1024

    # Anthropic (Claude)
    ANTHROPIC_API_KEY: str = ""
    ANTHROPIC_MODEL: str = "claude-3-5-sonnet-20241022"
    ANTHROPIC_TEMPERATURE: float = 0.2
    ANTHROPIC_MAX_TOKENS: int = 1024

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else ".env",
        case_sensitive=True,
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from .env that aren't in this model
    )

    @field_validator('DEFAULT_PROVIDER')
    @classmethod
    def validate_default_provider(cls, v: str) -> str:
        """Normalize the default provider and make sure it is a known one."""
        normalized = (v or "").strip().lower()
        if normalized not in KNOWN_PROVIDERS:
            raise ValueError(f"DEFAULT_PROVIDER must be one of: {', '.join(KNOWN_PROVIDERS)}")
        return normalized

    @field_validator('PORT')
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate listening port range."""
        if not 0 < v < 65536:
            raise ValueError('PORT must be between 1 and 65535')
        return v

    @field_validator('UPSTREAM_TIMEOUT_SECONDS')
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate outbound timeout."""
        if v <= 0:
            raise ValueError('UPSTREAM_TIMEOUT_SECONDS must be positive')
        return v

    @field_validator('XAI_MAX_TOKENS', 'ANTHROPIC_MAX_TOKENS')
    @classmethod
    def validate_max_tokens(cls, v: int) -> int:
        """Validate generation token limits."""
        if v < 1:
            raise ValueError('Max tokens must be at least 1')
        return v

    @field_validator('XAI_API_KEY', 'ANTHROPIC_API_KEY')
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Treat whitespace-only keys as missing."""
        return (v or "").strip()


settings = Settings()
