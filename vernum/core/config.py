"""Global configuration for vernum.

Holds the defaults used when grouping versioned files: filename case
sensitivity, the version separator, and the log level used by the CLI.
Settings can be overridden via environment variables or explicit configuration.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def system_case_sensitive(platform: str | None = None) -> bool:
    """Return whether filenames compare case-sensitively on this platform.

    Windows and macOS file systems are case-insensitive by default,
    everything else is treated as case-sensitive.
    """
    platform = (platform or sys.platform).lower()
    if platform.startswith("win") or platform.startswith("cygwin"):
        return False
    if platform.startswith("darwin"):
        return False
    return True


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


@dataclass
class VernumConfig:
    """Top-level configuration for vernum."""

    # None means "follow the platform"
    case_sensitive: bool | None = None

    version_separator: str = "."

    log_level: str = "WARNING"

    def resolve_case_sensitive(self) -> bool:
        """Return the explicit case rule, or the platform default."""
        if self.case_sensitive is None:
            return system_case_sensitive()
        return self.case_sensitive

    @classmethod
    def from_env(cls) -> VernumConfig:
        """Build config from environment variables, falling back to defaults."""
        config = cls()

        if val := os.environ.get("VERNUM_CASE_SENSITIVE"):
            config.case_sensitive = parse_bool(val)
        if val := os.environ.get("VERNUM_VERSION_SEPARATOR"):
            config.version_separator = val
        if val := os.environ.get("VERNUM_LOG_LEVEL"):
            config.log_level = val.upper()

        return config


# Module-level singleton
_config: VernumConfig | None = None


def get_config() -> VernumConfig:
    """Return the global vernum config, lazily initialized from env."""
    global _config
    if _config is None:
        _config = VernumConfig.from_env()
    return _config


def set_config(config: VernumConfig | None) -> None:
    """Override the global config (useful in tests).

    Passing None drops the cached config so the next get_config() re-reads
    the environment.
    """
    global _config
    _config = config
