"""
Configuration management for the Glo Boards API client
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from constants import GLO_API_BASE_URL


class GloConfig(BaseSettings):
    """Client configuration with environment variable support."""

    # Glo API settings
    api_token: Optional[str] = None
    base_url: str = GLO_API_BASE_URL

    # Transport settings (None keeps aiohttp's own default timeout)
    request_timeout: Optional[float] = None
    user_agent: str = "glo-boards-client/1.0"

    # Application settings
    log_level: str = "INFO"
    environment: str = "development"

    model_config = SettingsConfigDict(
        env_prefix="GLO_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"


# Global configuration instance - lazily initialized to avoid import-time errors
_config = None

def get_config() -> GloConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = GloConfig()
    return _config
