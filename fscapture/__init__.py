"""fs-capture: resolve a path to the file and/or directory that exists for it.

Given a base path and an optional alternate extension, fs-capture stats
each candidate concurrently and returns the ones that exist, classified as
file or directory, in the requested priority order.

>>> import asyncio
>>> from fscapture import capture
>>> asyncio.run(capture("does/not/exist"))
[]
"""

try:
    from importlib.metadata import version

    __version__ = version("fs-capture")
except Exception:
    __version__ = "0.0.0.dev0"  # Fallback for development installs

from fscapture.api import CaptureCallback, capture, capture_sync
from fscapture.domain import CaptureEntry, EntryType, ResolutionOptions, SortOrder
from fscapture.exceptions import (
    ConfigurationError,
    FSCaptureError,
    InvalidOptionError,
    ValidationError,
)
from fscapture.resolver import build_candidates, resolve

__all__ = [
    "__version__",
    # Entry points
    "capture",
    "capture_sync",
    "resolve",
    "build_candidates",
    "CaptureCallback",
    # Domain
    "CaptureEntry",
    "EntryType",
    "ResolutionOptions",
    "SortOrder",
    # Errors
    "ConfigurationError",
    "FSCaptureError",
    "InvalidOptionError",
    "ValidationError",
]
