"""Centralized logging configuration for fs-capture using Loguru.

The library emits DEBUG records during normal operation (candidate lists,
probe outcomes) and a WARNING when a probe batch fails. The ``fscapture``
namespace is disabled in loguru at import, so nothing reaches any sink
until :func:`configure_logging` is called or ``FSCAPTURE_LOG_LEVEL`` /
``FSCAPTURE_LOG_FORMAT`` is set.

Examples
--------
Basic usage:

>>> from fscapture.logging import get_logger
>>> logger = get_logger(__name__)
>>> logger.debug("Probing {} candidates", 2)

Configure logging globally::

    from fscapture.logging import configure_logging
    configure_logging(level="DEBUG", format="rich")
"""

import os
import sys
from contextlib import suppress
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from loguru import logger
from rich.logging import RichHandler

if TYPE_CHECKING:
    from loguru import Logger

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["console", "json", "structured", "rich"]

LOG_LEVELS: frozenset[str] = frozenset({"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
LOG_FORMATS: frozenset[str] = frozenset({"console", "json", "structured", "rich"})

_CURRENT_CONFIG: dict | None = None
_HANDLER_IDS: list[int] = []

logger.disable("fscapture")


def configure_logging(
    level: LogLevel = "WARNING",
    format: LogFormat = "structured",
    output_file: str | Path | None = None,
    use_color: bool = True,
    include_timestamp: bool = True,
    use_rich: bool = False,
    force_reconfigure: bool = False,
) -> None:
    """Configure logging for fs-capture.

    Idempotent: calling it again with the same settings does not add
    handlers. Besides loguru's default stderr handler (id 0), only handlers
    added here are removed on reconfiguration, so sinks installed by the
    application (or by pytest) are left alone. Enables the ``fscapture``
    namespace, which is disabled until then.

    Parameters
    ----------
    level : LogLevel, default="WARNING"
        Minimum log level to output
    format : LogFormat, default="structured"
        Output format:
        - "console": plain single-line output
        - "json": serialized records for log aggregation
        - "structured": colored loguru format with module/function/line
        - "rich": rich's ``RichHandler``
    output_file : str | Path | None, default=None
        Optional file to write JSON records to, in addition to stderr
    use_color : bool, default=True
        Use ANSI colors in structured format (auto-disabled for non-TTY)
    include_timestamp : bool, default=True
        Include timestamp in log output
    use_rich : bool, default=False
        Force the rich handler regardless of ``format``
    force_reconfigure : bool, default=False
        Reconfigure even if the settings are unchanged
    """
    global _CURRENT_CONFIG

    current_config = {
        "level": level,
        "format": format,
        "output_file": str(output_file) if output_file else None,
        "use_color": use_color,
        "include_timestamp": include_timestamp,
        "use_rich": use_rich,
    }

    if not force_reconfigure and current_config == _CURRENT_CONFIG:
        return

    for handler_id in _HANDLER_IDS:
        with suppress(ValueError):
            logger.remove(handler_id)
    _HANDLER_IDS.clear()

    # loguru's default stderr handler would duplicate every record
    with suppress(ValueError):
        logger.remove(0)

    if use_rich or format == "rich":
        rich_handler = RichHandler(
            rich_tracebacks=True,
            markup=False,
            show_time=include_timestamp,
            show_level=True,
            show_path=True,
        )
        handler_id = logger.add(sink=rich_handler, level=level, format="{message}")
        _HANDLER_IDS.append(handler_id)

    elif format == "json":
        handler_id = logger.add(sink=sys.stderr, level=level, serialize=True)
        _HANDLER_IDS.append(handler_id)

    elif format == "structured":
        colorize = use_color and sys.stderr.isatty()
        timestamp_fmt = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> " if include_timestamp else ""
        color_level = "<level>{level: <8}</level>" if colorize else "{level: <8}"
        structured_format = (
            f"{timestamp_fmt}[{color_level}]"
            "<cyan>{name}:{function}:{line}</cyan> | <level>{message}</level>"
        )
        handler_id = logger.add(
            sink=sys.stderr,
            level=level,
            format=structured_format,
            colorize=colorize,
        )
        _HANDLER_IDS.append(handler_id)

    else:  # console
        timestamp_fmt = "{time:YYYY-MM-DD HH:mm:ss} " if include_timestamp else ""
        console_format = f"{timestamp_fmt}{{level: <8}} | {{name}} | {{message}}"
        handler_id = logger.add(
            sink=sys.stderr,
            level=level,
            format=console_format,
            colorize=False,
        )
        _HANDLER_IDS.append(handler_id)

    if output_file:
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        # File output always uses JSON for easier parsing
        handler_id = logger.add(sink=output_path, level=level, serialize=True)
        _HANDLER_IDS.append(handler_id)

    _CURRENT_CONFIG = current_config
    logger.enable("fscapture")


@lru_cache(maxsize=128)
def get_logger(name: str) -> "Logger":
    """Get a logger bound with the given module name (cached).

    Parameters
    ----------
    name : str
        Logger name, typically ``__name__`` of the calling module

    Returns
    -------
    loguru.Logger
        Logger instance bound with ``module=name``

    Notes
    -----
    If :func:`configure_logging` hasn't been called yet, environment
    settings are applied first (see :func:`_ensure_configured`).
    """
    _ensure_configured()
    return logger.bind(module=name)


def reset_logging() -> None:
    """Remove the handlers added by :func:`configure_logging` and silence the library again."""
    global _CURRENT_CONFIG

    for handler_id in _HANDLER_IDS:
        with suppress(ValueError):
            logger.remove(handler_id)
    _HANDLER_IDS.clear()
    _CURRENT_CONFIG = None
    logger.disable("fscapture")


def _ensure_configured() -> None:
    """Configure from the environment if asked to and not configured yet.

    Setting ``FSCAPTURE_LOG_LEVEL`` or ``FSCAPTURE_LOG_FORMAT`` turns on
    library logs without code changes. With neither set the library stays
    silent.
    """
    if _CURRENT_CONFIG is not None:
        return
    env_level = os.getenv("FSCAPTURE_LOG_LEVEL")
    env_format = os.getenv("FSCAPTURE_LOG_FORMAT")
    if env_level or env_format:
        level = (env_level or "WARNING").upper()
        format_type = (env_format or "structured").lower()
        if level not in LOG_LEVELS:
            level = "WARNING"
        if format_type not in LOG_FORMATS:
            format_type = "structured"
        configure_logging(level=level, format=format_type)  # type: ignore[arg-type]


__all__ = [
    "LOG_FORMATS",
    "LOG_LEVELS",
    "LogFormat",
    "LogLevel",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
