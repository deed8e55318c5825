"""Configuration loading and models for fs-capture."""

from fscapture.config.loader import ConfigLoader, apply_config, load_config
from fscapture.config.models import FSCaptureConfig, LoggingConfig

__all__ = [
    "ConfigLoader",
    "FSCaptureConfig",
    "LoggingConfig",
    "apply_config",
    "load_config",
]
