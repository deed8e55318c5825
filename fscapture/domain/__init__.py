"""Domain layer exports for fs-capture."""

from fscapture.domain.capture import CaptureEntry, EntryType, ResolutionOptions, SortOrder
from fscapture.domain.probe import Absent, Failed, Found, ProbeResult

__all__ = [
    # Public result and options
    "CaptureEntry",
    "EntryType",
    "ResolutionOptions",
    "SortOrder",
    # Probe outcomes
    "Absent",
    "Failed",
    "Found",
    "ProbeResult",
]
