#!/usr/bin/env python3
"""
Walk through the two basic AllNewsAPI calls.

1. A simple search for "bitcoin".
2. Technology headlines.

Reads ALLNEWSAPI_API_KEY (and the other client settings) from the
environment or a .env file in the working directory.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add project root to sys.path for direct script execution.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from allnewsapi import AllNewsAPIError, SearchOptions, SearchResponse  # noqa: E402
from allnewsapi.config import get_settings  # noqa: E402
from allnewsapi.dependencies import get_client  # noqa: E402
from allnewsapi.utils.logging import setup_logging  # noqa: E402

logger = logging.getLogger("allnewsapi.demo")


def print_articles(response: SearchResponse) -> None:
    for article in response.articles:
        print(f"Title: {article.title}")
        print(f"Source: {article.source.name}")
        print(f"URL: {article.url}")
        print("---")
    print()


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json, settings.log_file)

    try:
        client = get_client(settings)

        print("EXAMPLE 1: Simple search for 'bitcoin'")
        response = client.search(SearchOptions(query="bitcoin", max_results=3))
        print(f"Found {response.total_articles} articles")
        print_articles(response)

        print("EXAMPLE 2: Get technology headlines")
        headlines = client.headlines(category=["technology"], max_results=3)
        print(f"Found {headlines.total_articles} headlines")
        print_articles(headlines)
    except AllNewsAPIError as e:
        logger.error(f"Demo failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
