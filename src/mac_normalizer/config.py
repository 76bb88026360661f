"""Configuration management."""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """Library and CLI configuration."""

    # Raise MACAddressError instead of returning None and recording errstr
    strict_errors: bool = False

    # Logging (CLI only)
    log_level: str = "INFO"
    log_format: str = "text"  # text, json or kv

    # Rendering used by the CLI when --format is not given
    default_format: str = "microsoft"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()

        config.strict_errors = os.getenv("MAC_STRICT_ERRORS", "false").lower() == "true"
        config.log_level = os.getenv("LOG_LEVEL", "INFO")
        config.log_format = os.getenv("LOG_FORMAT", "text")
        config.default_format = os.getenv("MAC_DEFAULT_FORMAT", "microsoft")

        return config


# Process-wide default, overridden per call by an explicit strict_errors argument
_strict_errors = False


def set_strict_errors(flag: bool) -> None:
    """Set the process-wide default for strict error reporting."""
    global _strict_errors
    _strict_errors = bool(flag)


def get_strict_errors() -> bool:
    return _strict_errors


def resolve_strict_errors(strict_errors: Optional[bool] = None) -> bool:
    """Return the per-call flag when given, otherwise the process-wide default."""
    if strict_errors is None:
        return _strict_errors
    return bool(strict_errors)
