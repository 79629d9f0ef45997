"""Endpoint port definition (DTO)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from yarl import URL

__all__ = ["DEFAULT_PATH", "EndpointDescriptor", "Scheme"]

DEFAULT_PATH = "/"


class Scheme(str, Enum):
    """Supported URL schemes."""

    HTTP = "http"
    HTTPS = "https"

    @property
    def default_port(self) -> int:
        return 443 if self is Scheme.HTTPS else 80


@dataclass(slots=True, frozen=True)
class EndpointDescriptor:
    """Immutable decomposition of an absolute http(s) URL.

    Attributes:
        scheme: Transport scheme; https means an encrypted channel.
        host: Host name or address (IDNA-encoded, no brackets).
        port: TCP port, defaulted per scheme when absent from the URL.
        path: Raw request path, never empty (ValueError otherwise).
        query: Raw query string without the leading '?', empty if absent.
    """

    scheme: Scheme
    host: str
    port: int
    path: str = DEFAULT_PATH
    query: str = ""

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Endpoint path must not be empty")

    @property
    def encrypted(self) -> bool:
        return self.scheme is Scheme.HTTPS

    @property
    def authority(self) -> str:
        """host:port, with IPv6 literals in brackets."""
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{host}:{self.port}"

    @property
    def target(self) -> str:
        """Request target sent on the request line (path plus query)."""
        if self.query:
            return f"{self.path}?{self.query}"
        return self.path

    @property
    def url(self) -> URL:
        """Absolute URL rebuilt from the descriptor parts."""
        return URL(f"{self.scheme.value}://{self.authority}{self.target}", encoded=True)
