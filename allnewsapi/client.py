"""AllNewsAPI client."""

import logging
import time
from typing import Any, Literal

import httpx
from pydantic import ValidationError

from allnewsapi import __version__
from allnewsapi.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from allnewsapi.exceptions import APIError, ConfigurationError, NetworkError, ResponseParseError
from allnewsapi.models import SearchOptions, SearchResponse
from allnewsapi.params import encode_params

logger = logging.getLogger(__name__)

Endpoint = Literal["search", "headlines"]


class AllNewsClient:
    """Synchronous client for AllNewsAPI v1.

    The client only holds its configuration, so one instance can be shared
    between threads. Every call opens and closes its own connection.

    ``timeout`` bounds each connect, write and read step, and the whole call
    is also given up once ``timeout`` seconds have passed while the body is
    still arriving. A timed-out call raises :class:`NetworkError`.

    The API key is sent in the query string. ``httpx`` logs request URLs at
    INFO, so applications that enable INFO logging should raise the
    ``httpx`` logger to WARNING (``setup_logging`` does this).
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        if not api_key:
            raise ConfigurationError("API key is required")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": f"allnewsapi-python/{__version__}"}

    def search(self, options: SearchOptions | None = None, **overrides: Any) -> SearchResponse:
        """
        Search for news articles.

        Args:
            options: Search options
            **overrides: SearchOptions fields, applied on top of ``options``

        Returns:
            Parsed search response

        Raises:
            InvalidDateTypeError: If a date option has an unsupported type
            NetworkError: On network errors
            APIError: On non-200 responses
            ResponseParseError: If the response body is not a valid search response
        """
        return self._get("search", options, overrides)

    def headlines(self, options: SearchOptions | None = None, **overrides: Any) -> SearchResponse:
        """Fetch news headlines. Takes the same options as :meth:`search`."""
        return self._get("headlines", options, overrides)

    def _get(
        self,
        endpoint: Endpoint,
        options: SearchOptions | None,
        overrides: dict[str, Any],
    ) -> SearchResponse:
        if overrides:
            base = options.model_dump() if options is not None else {}
            options = SearchOptions(**{**base, **overrides})

        # Encoding errors surface before any connection is opened
        params = encode_params(self.api_key, options)
        url = f"{self.base_url}/v1/{endpoint}"

        logger.debug(f"AllNewsAPI request: {url}", extra={"endpoint": endpoint})
        started = time.perf_counter()
        deadline = time.monotonic() + self.timeout

        with httpx.Client(
            timeout=self.timeout,
            headers=self._headers(),
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            try:
                with client.stream("GET", url, params=params) as response:
                    logger.debug(
                        f"AllNewsAPI response: {response.status_code}",
                        extra={
                            "endpoint": endpoint,
                            "status_code": response.status_code,
                            "duration_ms": round((time.perf_counter() - started) * 1000, 1),
                        },
                    )

                    if response.status_code != httpx.codes.OK:
                        raise APIError(
                            status_code=response.status_code,
                            response_text=_read_error_body(response, deadline),
                        )

                    try:
                        return SearchResponse.model_validate_json(_read_body(response, deadline))
                    except httpx.TimeoutException:
                        raise
                    except (httpx.HTTPError, ValidationError) as e:
                        raise ResponseParseError(f"error parsing response: {e}") from e
            except (httpx.RequestError, httpx.InvalidURL) as e:
                raise NetworkError(f"error making request: {e}") from e


def _read_body(response: httpx.Response, deadline: float) -> bytes:
    """Read a streamed body, failing with a timeout once the call deadline passes."""
    chunks = []
    for chunk in response.iter_bytes():
        if time.monotonic() > deadline:
            raise httpx.ReadTimeout(
                "call deadline exceeded while reading response", request=response.request
            )
        chunks.append(chunk)
    return b"".join(chunks)


def _read_error_body(response: httpx.Response, deadline: float) -> str:
    """Read an error body, treating a failed read as an empty body."""
    try:
        body = _read_body(response, deadline)
    except httpx.HTTPError:
        return ""
    return body.decode(response.encoding or "utf-8", errors="replace")
