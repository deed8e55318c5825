"""Candidate resolver: turns a base path and options into ordered entries."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from fscapture.domain.capture import CaptureEntry, ResolutionOptions, SortOrder
from fscapture.exceptions import InvalidOptionError
from fscapture.logging import get_logger
from fscapture.prober import StatFunc, probe

logger = get_logger(__name__)


def build_candidates(base_path: str, options: ResolutionOptions) -> list[str]:
    """Build the ordered candidate list for ``base_path``.

    With an empty extension both sort orders yield ``[base_path]``.

    Raises
    ------
    InvalidOptionError
        If ``options.sort`` is not a known :class:`SortOrder`
    """
    extension = options.extension

    match options.sort:
        case SortOrder.PREFER_BASE_FIRST:
            candidates = [base_path]
            if extension != "":
                candidates.append(base_path + extension)
        case SortOrder.PREFER_EXTENSION_FIRST:
            candidates = [base_path + extension]
            if extension != "":
                candidates.append(base_path)
        case _:
            # Only reachable through model_construct(), which skips validation
            raise InvalidOptionError(
                "sort", f"must be one of {[int(s) for s in SortOrder]}", options.sort
            )

    return candidates


async def resolve(
    base_path: str | os.PathLike[str],
    options: ResolutionOptions | Mapping[str, Any] | None = None,
    stat: StatFunc = os.stat,
) -> list[CaptureEntry]:
    """Resolve ``base_path`` to the entries that exist, in priority order.

    Parameters
    ----------
    base_path : str | os.PathLike[str]
        Logical resource path
    options : ResolutionOptions | Mapping[str, Any] | None
        Extension and sort order; defaults apply when omitted
    stat : StatFunc
        Metadata lookup, ``os.stat`` by default

    Raises
    ------
    InvalidOptionError
        If the options are invalid (raised before touching the filesystem)
    OSError
        If any candidate fails for a reason other than not existing
    """
    resolved = ResolutionOptions.coerce(options)
    try:
        path = os.fspath(base_path)
    except TypeError as e:
        raise InvalidOptionError("path", "must be a str or os.PathLike", base_path) from e
    if not isinstance(path, str):
        raise InvalidOptionError("path", "must be a str or str-based path", path)

    candidates = build_candidates(path, resolved)
    logger.debug("Resolving {} with candidates {}", path, candidates)
    return await probe(candidates, stat)


__all__ = ["build_candidates", "resolve"]
