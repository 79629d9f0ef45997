"""Settings port definition (DTO)."""

from dataclasses import dataclass

__all__ = ["SettingsPort"]


@dataclass(slots=True, frozen=True)
class SettingsPort:
    """Runtime settings for request execution.

    Decouples core from concrete configuration sources, enabling
    easy testing and implementation swapping.

    Attributes:
        verify_tls: Verify peer certificates and host names on https.
            False accepts any certificate (insecure).
        timeout_sec: Total time allowed per exchange; None disables it.
    """

    verify_tls: bool = True
    timeout_sec: float | None = None

    def __post_init__(self) -> None:
        if self.timeout_sec is not None and self.timeout_sec <= 0:
            raise ValueError(f"timeout_sec must be positive (got: {self.timeout_sec})")
