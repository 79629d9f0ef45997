"""aiohttp transport adapter: one session per request/response exchange."""

from __future__ import annotations

import asyncio
import logging
import ssl
from types import TracebackType

import aiohttp
from aiohttp import ClientTimeout, hdrs

from src.core.errors import TransportError
from src.ports.endpoint import EndpointDescriptor
from src.ports.http import HttpRequestDto, HttpResponseDto
from src.ports.settings import SettingsPort

__all__ = ["AiohttpTransport", "TRANSPORT_ERRORS", "build_ssl_context"]

logger = logging.getLogger(__name__)

# Failures surfaced to the caller as TransportError
TRANSPORT_ERRORS = (
    aiohttp.ClientError,  # Connection refused, DNS, TLS handshake, payload
    asyncio.TimeoutError,  # Total timeout exceeded
    OSError,  # Socket-level errors not wrapped by aiohttp
)


def build_ssl_context(verify_tls: bool) -> ssl.SSLContext:
    """Create the TLS context for an encrypted channel.

    Args:
        verify_tls: Verify peer certificate and host name when True.

    Returns:
        Client-side SSL context.
    """
    context = ssl.create_default_context()
    if not verify_tls:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


class AiohttpTransport:
    """Transport handle backed by a short-lived aiohttp session.

    Features:
    - Plaintext or TLS channel selected by the endpoint scheme.
    - No keep-alive and no pooling: the connection is closed after use.
    - Sends only the headers assembled by the caller (no automatic
      Content-Type).
    """

    def __init__(self, endpoint: EndpointDescriptor, settings: SettingsPort) -> None:
        """Initialize transport handle.

        Args:
            endpoint: The single endpoint this handle talks to.
            settings: TLS verification and timeout settings.
        """
        self.endpoint = endpoint
        self.settings = settings
        self.session: aiohttp.ClientSession | None = None

    @property
    def encrypted(self) -> bool:
        return self.endpoint.encrypted

    async def __aenter__(self) -> AiohttpTransport:
        """Open the session (the socket itself is opened on send).

        Returns:
            Self for use in async with statement.
        """
        ssl_context: ssl.SSLContext | bool = False
        if self.encrypted:
            if not self.settings.verify_tls:
                logger.warning(
                    f"TLS certificate verification disabled for {self.endpoint.host}"
                )
            ssl_context = build_ssl_context(self.settings.verify_tls)

        connector = aiohttp.TCPConnector(ssl=ssl_context, force_close=True, limit=1)
        self.session = aiohttp.ClientSession(
            connector=connector,
            timeout=ClientTimeout(total=self.settings.timeout_sec),
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Close the session and its connector.

        Args:
            exc_type: Exception type if raised in context.
            exc: Exception instance if raised in context.
            tb: Traceback if raised in context.
        """
        if self.session:
            await self.session.close()
            self.session = None

    async def send(self, request: HttpRequestDto) -> HttpResponseDto:
        """Send one request and read the whole response body.

        Args:
            request: Prepared request for this handle's endpoint.

        Returns:
            Response snapshot.

        Raises:
            RuntimeError: If session not initialized.
            TransportError: On connection, TLS, I/O or timeout failure.
        """
        if self.session is None:
            raise RuntimeError("Session not initialized; use 'async with' context manager")

        body = request.body
        if isinstance(body, str):
            body = body.encode("utf-8")

        url = request.endpoint.url
        try:
            async with self.session.request(
                request.method,
                url,
                data=body,
                headers=request.headers,
                skip_auto_headers=(hdrs.CONTENT_TYPE,),
                allow_redirects=False,
            ) as resp:
                payload = await resp.read()
                return HttpResponseDto(
                    status_code=resp.status,
                    headers={str(k): v for k, v in resp.headers.items()},
                    body=payload,
                )
        except TRANSPORT_ERRORS as e:
            logger.debug(f"{request.method} {url} failed: {e!r}")
            raise TransportError(request.method, str(url), str(e) or type(e).__name__) from e
