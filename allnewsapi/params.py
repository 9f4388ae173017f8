"""Query parameter encoding for the search and headlines endpoints."""

from datetime import datetime, timezone

from allnewsapi.exceptions import InvalidDateTypeError
from allnewsapi.models import SearchOptions

# Comma-joined list options, in the order they are sent. Attribute name equals wire key.
LIST_PARAMS = ("lang", "country", "region", "category", "attributes", "publisher")


def format_rfc3339(value: datetime) -> str:
    """Format a datetime the way the API expects (RFC 3339, whole seconds).

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def format_date(name: str, value: object) -> str:
    """Resolve a date option to its wire string.

    Raises:
        InvalidDateTypeError: If the value is neither a string nor a datetime
    """
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        return format_rfc3339(value)
    raise InvalidDateTypeError(f"{name} must be string or datetime, got {type(value).__name__}")


def encode_params(api_key: str, options: SearchOptions | None = None) -> list[tuple[str, str]]:
    """
    Map search options to an ordered list of query parameters.

    Options left at their empty value are omitted entirely. Integer options
    count as unset unless strictly positive.

    Args:
        api_key: API key, always sent first
        options: Search options, or None for no filters

    Returns:
        List of (key, value) pairs ready for the query string

    Raises:
        InvalidDateTypeError: If a date option has an unsupported type
    """
    params: list[tuple[str, str]] = [("apikey", api_key)]
    if options is None:
        return params

    if options.query:
        params.append(("q", options.query))

    if options.start_date is not None:
        params.append(("startDate", format_date("startDate", options.start_date)))
    if options.end_date is not None:
        params.append(("endDate", format_date("endDate", options.end_date)))

    if options.content is not None:
        params.append(("content", "true" if options.content else "false"))

    for key in LIST_PARAMS:
        values = getattr(options, key)
        if values:
            params.append((key, ",".join(values)))

    if options.max_results > 0:
        params.append(("max", str(options.max_results)))
    if options.page > 0:
        params.append(("page", str(options.page)))

    if options.sort_by:
        params.append(("sortby", options.sort_by))
    if options.format:
        params.append(("format", options.format))

    return params
