"""HTTP client facade: resolve a URL, then execute one request."""

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from src.adapters.driven.http.transport import AiohttpTransport
from src.core.request_executor import execute
from src.core.url_resolver import resolve
from src.ports.endpoint import EndpointDescriptor
from src.ports.http import HttpResponseDto
from src.ports.settings import SettingsPort
from src.ports.transport import TransportFactory

__all__ = ["HttpClient"]

logger = logging.getLogger(__name__)


class HttpClient:
    """Minimal GET/POST client.

    Features:
    - Plaintext or TLS transport chosen by URL scheme.
    - Mapping payloads sent as JSON text, anything else as raw text.
    - Fresh transport per call; no shared state between calls.
    - Optional per-call timeout.
    """

    def __init__(
        self,
        settings: SettingsPort | None = None,
        transport_factory: TransportFactory = AiohttpTransport,
    ) -> None:
        """Initialize HTTP client.

        Args:
            settings: TLS and timeout settings; defaults verify TLS, no timeout.
            transport_factory: Builds the per-call transport handle.
        """
        self.settings = settings or SettingsPort()
        self.transport_factory = transport_factory

    @staticmethod
    def resolve(url: str) -> EndpointDescriptor:
        """Resolve a URL without sending anything.

        Raises:
            MalformedURLError: If the URL is not an absolute http(s) URL.
        """
        return resolve(url)

    def _settings_for(self, timeout_sec: float | None) -> SettingsPort:
        if timeout_sec is None:
            return self.settings
        if timeout_sec <= 0:
            raise ValueError(f"timeout_sec must be positive (got: {timeout_sec})")
        return dataclasses.replace(self.settings, timeout_sec=timeout_sec)

    async def get(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout_sec: float | None = None,
    ) -> HttpResponseDto:
        """Send a GET request.

        The request target is the URL path plus its query string, if any.

        Args:
            url: Absolute http(s) URL.
            headers: Optional extra headers.
            timeout_sec: Overrides the configured timeout for this call.

        Returns:
            Response snapshot.

        Raises:
            ValueError: If timeout_sec is not positive.
            MalformedURLError: If the URL cannot be resolved.
            TransportError: On connection, TLS, I/O or timeout failure.
        """
        endpoint = resolve(url)
        return await execute(
            "GET",
            endpoint,
            settings=self._settings_for(timeout_sec),
            transport_factory=self.transport_factory,
            headers=headers,
        )

    async def post(
        self,
        url: str,
        payload: Any,
        json_intent: bool = False,
        *,
        headers: Mapping[str, str] | None = None,
        timeout_sec: float | None = None,
    ) -> HttpResponseDto:
        """Send a POST request.

        Mapping payloads are serialized to JSON whatever ``json_intent`` is;
        the flag only decides whether "Content-Type: application/json" is set.
        The request target is the URL path plus its query string, if any.

        Args:
            url: Absolute http(s) URL.
            payload: Mapping (sent as JSON text) or raw value.
            json_intent: Attach the JSON content type header.
            headers: Optional extra headers.
            timeout_sec: Overrides the configured timeout for this call.

        Returns:
            Response snapshot.

        Raises:
            ValueError: If timeout_sec is not positive.
            MalformedURLError: If the URL cannot be resolved.
            TransportError: On connection, TLS, I/O or timeout failure.
        """
        endpoint = resolve(url)
        return await execute(
            "POST",
            endpoint,
            payload,
            json_intent,
            settings=self._settings_for(timeout_sec),
            transport_factory=self.transport_factory,
            headers=headers,
        )
