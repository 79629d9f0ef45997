"""Public request operations.

Each call builds its own client from the environment configuration, so
concurrent calls never share a transport or any mutable state::

    response = await get("https://example.com")
    response = await post(webhook_url, {"text": "hello"}, json_intent=True)

Synchronous callers can wrap a call with ``asyncio.run``.
"""

from collections.abc import Mapping
from typing import Any

from src.adapters.driven.config.settings import load_settings
from src.adapters.driven.http.client import HttpClient
from src.core.url_resolver import resolve
from src.ports.http import HttpResponseDto

__all__ = ["get", "post", "resolve"]


def _client() -> HttpClient:
    return HttpClient(settings=load_settings().to_port())


async def get(
    url: str,
    *,
    headers: Mapping[str, str] | None = None,
    timeout_sec: float | None = None,
) -> HttpResponseDto:
    """Send a GET request to ``url`` and return the response."""
    return await _client().get(url, headers=headers, timeout_sec=timeout_sec)


async def post(
    url: str,
    payload: Any,
    json_intent: bool = False,
    *,
    headers: Mapping[str, str] | None = None,
    timeout_sec: float | None = None,
) -> HttpResponseDto:
    """Send a POST request to ``url`` and return the response.

    ``json_intent`` only adds "Content-Type: application/json"; mapping
    payloads are always sent as JSON text.
    """
    return await _client().post(
        url, payload, json_intent, headers=headers, timeout_sec=timeout_sec
    )
