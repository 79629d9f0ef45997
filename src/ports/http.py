"""HTTP port definitions (request and response DTOs)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Literal

from src.ports.endpoint import EndpointDescriptor

__all__ = ["HttpMethod", "HttpRequestDto", "HttpResponseDto"]

HttpMethod = Literal["GET", "POST"]


@dataclass(slots=True, frozen=True)
class HttpRequestDto:
    """Fully prepared request handed to a transport.

    Decouples payload serialization and header assembly from the
    transport implementation.

    Attributes:
        method: HTTP method.
        endpoint: Resolved endpoint the request targets.
        headers: Headers to send, exactly as assembled by the executor.
        body: Serialized body; None for requests without a body.
    """

    method: HttpMethod
    endpoint: EndpointDescriptor
    headers: dict[str, str] = field(default_factory=dict)
    body: str | bytes | None = None


@dataclass(slots=True, frozen=True)
class HttpResponseDto:
    """Read-only snapshot of an HTTP response.

    Attributes:
        status_code: HTTP status code as returned by the server.
        headers: Response headers (last value wins for repeated names).
        body: Raw response payload.
    """

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def charset(self) -> str:
        """Charset declared in Content-Type, utf-8 when absent."""
        content_type = next(
            (v for k, v in self.headers.items() if k.lower() == "content-type"), ""
        )
        for part in content_type.split(";")[1:]:
            name, _, value = part.strip().partition("=")
            if name.lower() == "charset" and value:
                return value.strip('"')
        return "utf-8"

    @property
    def text(self) -> str:
        """Body decoded with the declared charset (undecodable bytes replaced)."""
        try:
            return self.body.decode(self.charset, errors="replace")
        except LookupError:
            return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Parse the body as JSON.

        Raises:
            json.JSONDecodeError: If the body is not valid JSON.
        """
        return json.loads(self.text)
