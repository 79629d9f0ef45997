"""URL resolution into endpoint descriptors."""

from yarl import URL

from src.core.errors import MalformedURLError
from src.ports.endpoint import DEFAULT_PATH, EndpointDescriptor, Scheme

__all__ = ["resolve"]


def resolve(url: str) -> EndpointDescriptor:
    """Parse an absolute http(s) URL into an endpoint descriptor.

    The port falls back to the scheme default (80/443). An empty path is
    replaced with "/"; any other path is kept exactly as written.

    Args:
        url: Absolute URL, e.g. "https://example.com/foo/bar/".

    Returns:
        Endpoint descriptor for the URL.

    Raises:
        MalformedURLError: If the URL has no scheme or host, has an invalid
            port, or uses a scheme other than http/https.
    """
    if not isinstance(url, str):
        raise MalformedURLError(url, "expected a string")

    try:
        parsed = URL(url.strip())
        port = parsed.port
    except (TypeError, ValueError) as e:
        raise MalformedURLError(url, str(e)) from e

    if not parsed.scheme:
        raise MalformedURLError(url, "missing scheme")
    if not parsed.raw_host:
        raise MalformedURLError(url, "missing host")

    try:
        scheme = Scheme(parsed.scheme.lower())
    except ValueError as e:
        raise MalformedURLError(url, f"unsupported scheme {parsed.scheme!r}") from e

    return EndpointDescriptor(
        scheme=scheme,
        host=parsed.raw_host,
        port=port if port is not None else scheme.default_port,
        path=parsed.raw_path or DEFAULT_PATH,
        query=parsed.raw_query_string,
    )
