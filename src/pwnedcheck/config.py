"""Configuration management for pwnedcheck.

Uses pydantic-settings to load configuration from environment variables
and .env files.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pwnedcheck import __version__


class Settings(BaseSettings):
    """pwnedcheck configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="PWNEDCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Pwned Passwords range API
    api_base_url: str = Field(default="https://api.pwnedpasswords.com")
    timeout: float = Field(default=30.0, gt=0)  # Seconds
    user_agent: str = Field(default=f"pwnedcheck/{__version__}")
    add_padding: bool = Field(default=True)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING"
    )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None
