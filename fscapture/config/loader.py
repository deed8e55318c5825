"""Configuration loading for fs-capture.

Configuration is optional. Sources, in discovery order:

1. An explicit path passed to :func:`load_config` (TOML or YAML)
2. The ``FSCAPTURE_CONFIG_PATH`` env var
3. ``pyproject.toml`` in the working directory, ``[tool.fscapture]`` table

When none of them provides settings, defaults are used. ``FSCAPTURE_LOG_*``
environment variables override whatever the file says.
"""

from __future__ import annotations

import os
import re
import tomllib
from pathlib import Path
from typing import Any

import yaml

from fscapture.config.models import FSCaptureConfig, LoggingConfig
from fscapture.exceptions import ConfigurationError
from fscapture.logging import configure_logging, get_logger

# Constants for boolean environment variable parsing
_TRUTHY_VALUES = frozenset({"true", "1", "yes", "on", "enabled"})
_FALSY_VALUES = frozenset({"false", "0", "no", "off", "disabled"})

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

logger = get_logger(__name__)


def _parse_bool_env(value: str) -> bool:
    """Parse boolean from environment variable value.

    Raises
    ------
    ValueError
        If value is not a recognized boolean string
    """
    normalized = value.lower().strip()
    if normalized in _TRUTHY_VALUES:
        return True
    if normalized in _FALSY_VALUES:
        return False
    expected = sorted(_TRUTHY_VALUES | _FALSY_VALUES)
    raise ValueError(f"Invalid boolean value: {value!r}. Expected one of: {expected}")


class ConfigLoader:
    """Loads fs-capture configuration from TOML or YAML files."""

    def load(self, path: str | Path | None = None) -> FSCaptureConfig:
        """Load configuration, falling back to defaults.

        Parameters
        ----------
        path : str | Path | None
            Path to a config file. If None, searches using discovery order.

        Raises
        ------
        FileNotFoundError
            If an explicit ``path`` does not exist
        ConfigurationError
            If the file content is not a valid configuration
        """
        config_path = self._find_config_file(path)
        if config_path is None:
            logger.debug("No configuration file found, using defaults")
            return self._parse_config({})

        logger.debug("Loading configuration from {}", config_path)
        if config_path.suffix in (".yaml", ".yml"):
            data = self._read_yaml(config_path)
        else:
            data = self._read_toml(config_path)
        return self._parse_config(self._substitute_env_vars(data))

    def _find_config_file(self, path: str | Path | None) -> Path | None:
        if path:
            config_path = Path(path)
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return config_path

        if env_path := os.getenv("FSCAPTURE_CONFIG_PATH"):
            config_path = Path(env_path)
            if config_path.exists():
                logger.debug("Using config from FSCAPTURE_CONFIG_PATH: {}", config_path)
                return config_path
            logger.warning("FSCAPTURE_CONFIG_PATH set but file not found: {}", config_path)

        if Path("pyproject.toml").exists():
            return Path("pyproject.toml")

        return None

    def _read_toml(self, config_path: Path) -> dict[str, Any]:
        try:
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(str(config_path), f"invalid TOML: {e}") from e

        # pyproject.toml and standalone files may both nest under [tool.fscapture]
        tool_data = data.get("tool", {}).get("fscapture")
        if tool_data is not None:
            return tool_data
        if config_path.name == "pyproject.toml":
            return {}
        return data

    def _read_yaml(self, config_path: Path) -> dict[str, Any]:
        try:
            with config_path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(str(config_path), f"invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                str(config_path), f"expected a mapping, got {type(data).__name__}"
            )
        return data.get("fscapture", data)

    def _substitute_env_vars(self, data: Any) -> Any:
        """Recursively replace ``${VAR}`` placeholders with environment values.

        Unset variables keep their placeholder.
        """
        if isinstance(data, str):

            def replacer(match: re.Match[str]) -> str:
                value = os.environ.get(match.group(1))
                return match.group(0) if value is None else value

            return _ENV_VAR_PATTERN.sub(replacer, data)

        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}

        if isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]

        return data

    def _parse_config(self, data: dict[str, Any]) -> FSCaptureConfig:
        logging_data = data.get("logging", {})
        if not isinstance(logging_data, dict):
            raise ConfigurationError("logging", "must be a table/mapping")
        return FSCaptureConfig(logging=self._parse_logging_config(logging_data))

    def _parse_logging_config(self, logging_data: dict[str, Any]) -> LoggingConfig:
        """Parse logging configuration with environment variable overrides.

        Environment variables take precedence over config file values:
        - FSCAPTURE_LOG_LEVEL: Log level
        - FSCAPTURE_LOG_FORMAT: Output format (console, json, structured, rich)
        - FSCAPTURE_LOG_FILE: Optional file path for log output
        - FSCAPTURE_LOG_COLOR: Use color output (true/false)
        - FSCAPTURE_LOG_TIMESTAMP: Include timestamp (true/false)
        - FSCAPTURE_LOG_RICH: Use Rich library for output (true/false)
        """
        level = str(logging_data.get("level", "WARNING")).upper()
        format_type = str(logging_data.get("format", "structured")).lower()
        output_file = logging_data.get("output_file")
        use_color = logging_data.get("use_color", True)
        include_timestamp = logging_data.get("include_timestamp", True)
        use_rich = logging_data.get("use_rich", False)

        if env_level := os.getenv("FSCAPTURE_LOG_LEVEL"):
            level = env_level.upper()
            logger.debug("Overriding log level from env: {}", level)

        if env_format := os.getenv("FSCAPTURE_LOG_FORMAT"):
            format_type = env_format.lower()
            logger.debug("Overriding log format from env: {}", format_type)

        if env_file := os.getenv("FSCAPTURE_LOG_FILE"):
            output_file = env_file
            logger.debug("Overriding log file from env: {}", output_file)

        if env_color := os.getenv("FSCAPTURE_LOG_COLOR"):
            try:
                use_color = _parse_bool_env(env_color)
            except ValueError as e:
                logger.warning("Invalid FSCAPTURE_LOG_COLOR value: {}", e)

        if env_timestamp := os.getenv("FSCAPTURE_LOG_TIMESTAMP"):
            try:
                include_timestamp = _parse_bool_env(env_timestamp)
            except ValueError as e:
                logger.warning("Invalid FSCAPTURE_LOG_TIMESTAMP value: {}", e)

        if env_rich := os.getenv("FSCAPTURE_LOG_RICH"):
            try:
                use_rich = _parse_bool_env(env_rich)
            except ValueError as e:
                logger.warning("Invalid FSCAPTURE_LOG_RICH value: {}", e)

        # Level and format are checked in LoggingConfig.__post_init__
        return LoggingConfig(
            level=level,  # type: ignore[arg-type]
            format=format_type,  # type: ignore[arg-type]
            output_file=output_file,
            use_color=bool(use_color),
            include_timestamp=bool(include_timestamp),
            use_rich=bool(use_rich),
        )


def load_config(path: str | Path | None = None) -> FSCaptureConfig:
    """Load fs-capture configuration.

    Examples
    --------
    >>> config = load_config()  # doctest: +SKIP
    >>> config.logging.level  # doctest: +SKIP
    'WARNING'
    """
    return ConfigLoader().load(path)


def apply_config(config: FSCaptureConfig) -> None:
    """Apply a loaded configuration to the logging subsystem."""
    log = config.logging
    configure_logging(
        level=log.level,
        format=log.format,
        output_file=log.output_file,
        use_color=log.use_color,
        include_timestamp=log.include_timestamp,
        use_rich=log.use_rich,
    )


__all__ = ["ConfigLoader", "apply_config", "load_config"]
