"""Custom exceptions for the AllNewsAPI client."""


class AllNewsAPIError(Exception):
    """Base exception for the AllNewsAPI client."""

    pass


class ConfigurationError(AllNewsAPIError):
    """Exception raised for configuration errors."""

    pass


class InvalidDateTypeError(AllNewsAPIError, TypeError):
    """Exception raised when a date option is neither a string nor a datetime."""

    pass


class NetworkError(AllNewsAPIError):
    """Exception raised for network/connection errors."""

    pass


class APIError(AllNewsAPIError):
    """Exception raised when the API answers with a non-200 status."""

    def __init__(self, status_code: int, response_text: str = ""):
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(f"API error (status {status_code}): {response_text}")


class ResponseParseError(AllNewsAPIError):
    """Exception raised when a successful response body cannot be decoded."""

    pass
