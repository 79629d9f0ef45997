"""Single-shot request execution over a per-call transport."""

import json
import logging
from collections.abc import Mapping
from typing import Any

from src.ports.endpoint import EndpointDescriptor
from src.ports.http import HttpMethod, HttpRequestDto, HttpResponseDto
from src.ports.settings import SettingsPort
from src.ports.transport import TransportFactory

__all__ = ["JSON_CONTENT_TYPE", "build_headers", "execute", "serialize_payload"]

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def serialize_payload(payload: Any) -> str | bytes:
    """Serialize a POST payload.

    Mappings become compact JSON whatever the caller's JSON intent is.
    Strings and bytes are sent verbatim, None as an empty body, and
    anything else as its string representation.

    Args:
        payload: Value to send as the request body.

    Returns:
        Body text (or raw bytes).
    """
    if isinstance(payload, Mapping):
        return json.dumps(dict(payload), separators=(",", ":"), ensure_ascii=False)
    if isinstance(payload, (str, bytes)):
        return payload
    if payload is None:
        return ""
    return str(payload)


def build_headers(
    method: HttpMethod,
    json_intent: bool = False,
    extra: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Assemble request headers.

    Args:
        method: HTTP method; only POST honours the JSON intent flag.
        json_intent: Attach "Content-Type: application/json" when True.
        extra: Caller-supplied headers, applied last.

    Returns:
        New header dictionary.
    """
    headers: dict[str, str] = {}
    if method == "POST" and json_intent:
        headers["Content-Type"] = JSON_CONTENT_TYPE
    if extra:
        headers.update(extra)
    return headers


async def execute(
    method: HttpMethod,
    endpoint: EndpointDescriptor,
    payload: Any = None,
    json_intent: bool = False,
    *,
    settings: SettingsPort,
    transport_factory: TransportFactory,
    headers: Mapping[str, str] | None = None,
) -> HttpResponseDto:
    """Execute one request/response exchange.

    Opens a fresh transport for the endpoint, sends the request and closes
    the transport on every exit path. The response is returned as-is:
    status codes are not interpreted and nothing is retried.

    Args:
        method: "GET" or "POST".
        endpoint: Resolved target.
        payload: POST body; ignored for GET.
        json_intent: Attach the JSON content type header on POST.
        settings: TLS verification and timeout settings.
        transport_factory: Builds the per-call transport.
        headers: Optional extra headers.

    Returns:
        Response snapshot.

    Raises:
        ValueError: If the method is not GET or POST.
        TransportError: On connection, TLS, I/O or timeout failure.
    """
    if method not in ("GET", "POST"):
        raise ValueError(f"Unsupported HTTP method: {method}")

    request = HttpRequestDto(
        method=method,
        endpoint=endpoint,
        headers=build_headers(method, json_intent, headers),
        body=serialize_payload(payload) if method == "POST" else None,
    )

    async with transport_factory(endpoint, settings) as transport:
        logger.debug(
            f"{method} {endpoint.scheme.value}://{endpoint.authority}"
            f"{endpoint.target} (encrypted={transport.encrypted})"
        )
        response = await transport.send(request)

    logger.debug(f"{method} {endpoint.target} returned status {response.status_code}")
    return response
