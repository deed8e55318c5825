"""Tagged per-candidate probe outcomes.

A probe never uses exceptions to signal absence. Each candidate yields
exactly one of :class:`Found`, :class:`Absent` or :class:`Failed`, and the
batch step turns a list of these into entries or a single error.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from fscapture.domain.capture import CaptureEntry


@dataclass(frozen=True, slots=True)
class Found:
    """The candidate exists."""

    path: str
    stats: os.stat_result

    def to_entry(self) -> CaptureEntry:
        return CaptureEntry.from_stat(self.path, self.stats)


@dataclass(frozen=True, slots=True)
class Absent:
    """The candidate does not exist."""

    path: str


@dataclass(frozen=True, slots=True)
class Failed:
    """Stat failed for a reason other than absence."""

    path: str
    error: OSError


ProbeResult = Found | Absent | Failed


__all__ = ["Absent", "Failed", "Found", "ProbeResult"]
