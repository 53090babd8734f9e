"""Configuration loading and management."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from tealoop.constants import (
    DEFAULT_BLINK_INTERVAL,
    DEFAULT_PROBE_TIMEOUT,
    DEFAULT_PROBE_URL,
    DEFAULT_SCAN_SUFFIX,
)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """tealoop configuration.

    Loads from .env and the process environment; CLI options override.
    """

    # Probe settings
    probe_url: str = DEFAULT_PROBE_URL
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT

    # Listing settings
    scan_suffix: str = DEFAULT_SCAN_SUFFIX
    respect_ignore: bool = False

    # Display settings
    blink_interval: float = DEFAULT_BLINK_INTERVAL
    alt_screen: bool = False

    # Event log
    log_events: bool = False

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from the environment.

        Returns:
            Config instance

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        load_dotenv()

        return cls(
            probe_url=os.getenv("TEALOOP_PROBE_URL", DEFAULT_PROBE_URL),
            probe_timeout=float(os.getenv("TEALOOP_PROBE_TIMEOUT", DEFAULT_PROBE_TIMEOUT)),
            scan_suffix=os.getenv("TEALOOP_SCAN_SUFFIX", DEFAULT_SCAN_SUFFIX),
            respect_ignore=_env_flag("TEALOOP_RESPECT_IGNORE"),
            blink_interval=float(os.getenv("TEALOOP_BLINK_INTERVAL", DEFAULT_BLINK_INTERVAL)),
            alt_screen=_env_flag("TEALOOP_ALT_SCREEN"),
            log_events=_env_flag("TEALOOP_LOG_EVENTS"),
        )

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not self.probe_url.startswith(("http://", "https://")):
            errors.append("probe_url must start with http:// or https://")

        if self.probe_timeout <= 0:
            errors.append("probe_timeout must be positive")

        if not self.scan_suffix:
            errors.append("scan_suffix must not be empty")

        if self.blink_interval <= 0:
            errors.append("blink_interval must be positive")

        return errors

    def to_dict(self) -> dict:
        """Convert config to dictionary (for display)."""
        return {
            "probe_url": self.probe_url,
            "probe_timeout": self.probe_timeout,
            "scan_suffix": self.scan_suffix,
            "respect_ignore": self.respect_ignore,
            "blink_interval": self.blink_interval,
            "alt_screen": self.alt_screen,
            "log_events": self.log_events,
        }
