"""Client library for the AllNewsAPI news search service."""

__version__ = "1.0.0"

from allnewsapi.client import AllNewsClient  # noqa: E402
from allnewsapi.exceptions import (  # noqa: E402
    AllNewsAPIError,
    APIError,
    ConfigurationError,
    InvalidDateTypeError,
    NetworkError,
    ResponseParseError,
)
from allnewsapi.models import Article, SearchOptions, SearchResponse, Source  # noqa: E402

__all__ = [
    "AllNewsClient",
    "AllNewsAPIError",
    "APIError",
    "Article",
    "ConfigurationError",
    "InvalidDateTypeError",
    "NetworkError",
    "ResponseParseError",
    "SearchOptions",
    "SearchResponse",
    "Source",
]
