"""Existence prober: concurrent stat of candidate paths.

Each candidate is stat'ed in the event loop's default executor so the
lookups overlap. Outcomes are collected as tagged :mod:`probe results
<fscapture.domain.probe>` in input order, then reduced to a list of
:class:`~fscapture.domain.capture.CaptureEntry` or a single error.
"""

from __future__ import annotations

import asyncio
import errno
import os
from collections.abc import Callable, Sequence

from fscapture.domain.capture import CaptureEntry
from fscapture.domain.probe import Absent, Failed, Found, ProbeResult
from fscapture.logging import get_logger

logger = get_logger(__name__)

StatFunc = Callable[[str], os.stat_result]


def _is_absent(error: OSError) -> bool:
    return isinstance(error, FileNotFoundError) or error.errno == errno.ENOENT


async def probe_path(path: str, stat: StatFunc = os.stat) -> ProbeResult:
    """Stat a single candidate without raising for filesystem errors.

    Parameters
    ----------
    path : str
        Candidate path
    stat : StatFunc
        Metadata lookup, ``os.stat`` by default

    Returns
    -------
    ProbeResult
        ``Found`` with the stat record, ``Absent`` if the path does not
        exist, ``Failed`` for any other :class:`OSError`
    """
    loop = asyncio.get_running_loop()
    try:
        stats = await loop.run_in_executor(None, stat, path)
    except OSError as e:
        if _is_absent(e):
            logger.debug("Candidate absent: {}", path)
            return Absent(path)
        logger.debug("Candidate failed: {} ({})", path, e)
        return Failed(path, e)

    logger.debug("Candidate found: {}", path)
    return Found(path, stats)


def collect(results: Sequence[ProbeResult]) -> list[CaptureEntry]:
    """Reduce per-candidate outcomes to entries.

    Absent candidates are dropped. If any candidate failed, the first
    failure in input order is raised and all other outcomes are discarded.

    Raises
    ------
    OSError
        The original error of the first failed candidate
    """
    for result in results:
        if isinstance(result, Failed):
            raise result.error

    return [result.to_entry() for result in results if isinstance(result, Found)]


async def probe(paths: Sequence[str], stat: StatFunc = os.stat) -> list[CaptureEntry]:
    """Stat all candidates concurrently and return the ones that exist.

    Parameters
    ----------
    paths : Sequence[str]
        Candidates in priority order
    stat : StatFunc
        Metadata lookup, ``os.stat`` by default

    Returns
    -------
    list[CaptureEntry]
        Existing entries, in the same relative order as ``paths``

    Raises
    ------
    OSError
        If any candidate fails for a reason other than not existing. The
        whole batch fails; no partial result is returned.
    """
    results = await asyncio.gather(*(probe_path(path, stat) for path in paths))

    try:
        entries = collect(results)
    except OSError as e:
        logger.warning("Probe failed for {} candidate(s): {}", len(paths), e)
        raise

    logger.debug("Probed {} candidate(s), {} found", len(paths), len(entries))
    return entries


__all__ = ["StatFunc", "collect", "probe", "probe_path"]
