"""Configuration data models.

This module defines dataclasses for SmartEncode configuration options.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )


@dataclass(frozen=True)
class Profile:
    """Named option preset.

    A profile captures one deployment variant of the rule set (target codec,
    subtitle policy, skip strictness, ...) as data. Raw options supplied by
    the host override the profile's values.
    """

    name: str
    title: str
    description: str | None = None
    options: Mapping[str, Any] = field(default_factory=dict)
    logging: LoggingConfig | None = None

    def __post_init__(self) -> None:
        # Freeze the options mapping as well
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
