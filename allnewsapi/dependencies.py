"""Client construction from settings."""

from allnewsapi.client import AllNewsClient
from allnewsapi.config import Settings, get_settings
from allnewsapi.exceptions import ConfigurationError


def get_client(settings: Settings | None = None) -> AllNewsClient:
    """Get an AllNewsAPI client configured from settings."""
    settings = settings or get_settings()
    if not settings.allnewsapi_api_key:
        raise ConfigurationError("ALLNEWSAPI_API_KEY is not configured. Please set it in .env")
    return AllNewsClient(
        api_key=settings.allnewsapi_api_key,
        base_url=settings.allnewsapi_base_url,
        timeout=settings.allnewsapi_timeout,
    )
