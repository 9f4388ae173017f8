"""Client configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.allnewsapi.com"
DEFAULT_TIMEOUT = 30.0


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # AllNewsAPI Configuration
    allnewsapi_api_key: str = Field(default="", description="AllNewsAPI key from the account dashboard")
    allnewsapi_base_url: str = Field(default=DEFAULT_BASE_URL, description="Base URL for AllNewsAPI")
    allnewsapi_timeout: float = Field(
        default=DEFAULT_TIMEOUT, description="HTTP request timeout in seconds"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(default=False, description="Use JSON log format")
    log_file: str | None = Field(default=None, description="Optional log file path")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
