"""Transport port definition (interface)."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import Protocol

from src.ports.endpoint import EndpointDescriptor
from src.ports.http import HttpRequestDto, HttpResponseDto
from src.ports.settings import SettingsPort

__all__ = ["TransportFactory", "TransportPort"]


class TransportPort(Protocol):
    """Connection to one host:port pair, scoped to one exchange.

    Implementations open the channel on ``__aenter__`` and must release
    every resource on ``__aexit__``, including after a failed send.
    """

    @property
    def encrypted(self) -> bool:
        """True if the channel uses TLS."""
        ...

    async def __aenter__(self) -> TransportPort: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    async def send(self, request: HttpRequestDto, /) -> HttpResponseDto:
        """Issue the request and read the full response.

        Args:
            request: Prepared request.

        Returns:
            Response snapshot.

        Raises:
            TransportError: On connection, TLS, I/O or timeout failure.
        """
        ...


TransportFactory = Callable[[EndpointDescriptor, SettingsPort], TransportPort]
