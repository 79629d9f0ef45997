"""Error taxonomy for the request client."""

from __future__ import annotations

__all__ = ["HttpClientError", "MalformedURLError", "TransportError"]


class HttpClientError(Exception):
    """Base class for every error raised by the client."""


class MalformedURLError(HttpClientError, ValueError):
    """Raised when a string cannot be resolved to an absolute http(s) URL.

    Caller error; never retried.
    """

    def __init__(self, url: object, reason: str) -> None:
        """Initialize malformed URL error.

        Args:
            url: The offending input, as given by the caller.
            reason: Short explanation of what is missing or invalid.
        """
        super().__init__(f"Malformed URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class TransportError(HttpClientError):
    """Raised on connection, TLS, I/O or timeout failure.

    The underlying exception is available as ``__cause__``.
    """

    def __init__(self, method: str, url: str, message: str) -> None:
        """Initialize transport error.

        Args:
            method: HTTP method of the failed exchange.
            url: Absolute URL of the failed exchange.
            message: Description of the underlying failure.
        """
        super().__init__(f"{method} {url} failed: {message}")
        self.method = method
        self.url = url
