"""
Custom exceptions for Latch client library.
"""


class LatchClientError(Exception):
    """Base exception for Latch client errors."""
    pass


class SigningError(LatchClientError, ValueError):
    """Raised when a request cannot be signed (empty secret or empty data)."""
    pass


class InvalidHeaderError(SigningError):
    """Raised when a header outside the X-11paths- namespace is passed for signing."""
    pass


class ConfigurationError(LatchClientError):
    """Raised when client or proxy configuration is invalid."""
    pass


class HTTPError(LatchClientError):
    """Raised when the HTTP request fails."""
    pass


class ResponseError(LatchClientError):
    """Raised when the API returns a body that is not a JSON object."""
    pass
