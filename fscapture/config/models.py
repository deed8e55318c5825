"""Configuration data models for fs-capture."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from fscapture.exceptions import ConfigurationError
from fscapture.logging import LOG_FORMATS, LOG_LEVELS


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging configuration for fs-capture.

    Attributes
    ----------
    level : str, default="WARNING"
        Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
    format : str, default="structured"
        Output format (console, json, structured, rich)
    output_file : str | None, default=None
        Optional file path to write logs to
    use_color : bool, default=True
        Use ANSI color codes (auto-disabled for non-TTY)
    include_timestamp : bool, default=True
        Include timestamp in log output
    use_rich : bool, default=False
        Use Rich library for console output

    Examples
    --------
    TOML configuration:

    ```toml
    [tool.fscapture.logging]
    level = "DEBUG"
    format = "rich"
    ```

    Environment variable overrides:

    ```bash
    export FSCAPTURE_LOG_LEVEL=DEBUG
    export FSCAPTURE_LOG_FORMAT=json
    export FSCAPTURE_LOG_FILE=/var/log/fscapture.log
    ```
    """

    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "structured", "rich"] = "structured"
    output_file: str | None = None
    use_color: bool = True
    include_timestamp: bool = True
    use_rich: bool = False

    def __post_init__(self) -> None:
        """Validate level and format.

        Raises
        ------
        ConfigurationError
            If level or format is not recognized
        """
        if self.level not in LOG_LEVELS:
            raise ConfigurationError(
                "logging", f"unknown level {self.level!r}, expected one of {sorted(LOG_LEVELS)}"
            )
        if self.format not in LOG_FORMATS:
            raise ConfigurationError(
                "logging", f"unknown format {self.format!r}, expected one of {sorted(LOG_FORMATS)}"
            )


@dataclass(frozen=True, slots=True)
class FSCaptureConfig:
    """Top-level fs-capture configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
