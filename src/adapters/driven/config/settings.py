"""Configuration loading from environment variables."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from src.ports.settings import SettingsPort

__all__ = ["Settings", "load_settings"]

load_dotenv()

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


class Settings(BaseModel):
    """Runtime configuration for the request client.

    Attributes:
        verify_tls: Verify TLS peer certificates and host names.
        timeout_sec: Optional total timeout per request in seconds.
    """

    verify_tls: bool = Field(
        default=True,
        description=(
            "Verify peer certificates and host names on https. "
            "Disable only for hosts with self-signed certificates."
        ),
    )
    timeout_sec: float | None = Field(
        default=None,
        gt=0,
        description="Total time allowed per request. If not set, no timeout is applied.",
    )

    def to_port(self) -> SettingsPort:
        """Wrap settings into the port consumed by the core."""
        return SettingsPort(verify_tls=self.verify_tls, timeout_sec=self.timeout_sec)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise RuntimeError(f"{name} must be a boolean (got: {raw})")


def load_settings() -> Settings:
    """Load and validate settings from the environment.

    Optional environment variables:
    - HTTP_CLIENT_VERIFY_TLS: true/false, defaults to true.
    - HTTP_CLIENT_TIMEOUT_SECONDS: positive number of seconds, unset for none.

    Returns:
        Validated Settings object.

    Raises:
        RuntimeError: If a variable is set to an invalid value.
    """
    verify_raw = os.getenv("HTTP_CLIENT_VERIFY_TLS")
    timeout_raw = os.getenv("HTTP_CLIENT_TIMEOUT_SECONDS")

    verify_tls = True
    if verify_raw is not None and verify_raw.strip():
        verify_tls = _parse_bool("HTTP_CLIENT_VERIFY_TLS", verify_raw)

    timeout_sec: float | None = None
    if timeout_raw is not None and timeout_raw.strip():
        try:
            timeout_sec = float(timeout_raw)
            if timeout_sec <= 0:
                raise ValueError("Must be positive")
        except ValueError as e:
            raise RuntimeError(
                f"HTTP_CLIENT_TIMEOUT_SECONDS must be a positive number (got: {timeout_raw})"
            ) from e

    settings = Settings(verify_tls=verify_tls, timeout_sec=timeout_sec)

    logger.debug(
        f"HTTP client configured: verify_tls={settings.verify_tls}, "
        f"timeout={settings.timeout_sec or '<disabled>'}"
    )

    return settings
