"""Public capture API.

:func:`capture` is the single entry point. It is a coroutine that returns
the captured entries or raises. Passing ``callback`` switches to the
completion-callback convention: the callback receives ``(error, results)``
and its return value becomes the return value of :func:`capture`.

Examples
--------
Coroutine style::

    entries = await capture("templates/index", {"extension": ".html"})

Callback style::

    def done(error, entries):
        if error is not None:
            ...
        return entries

    await capture("templates/index", {"extension": ".html"}, callback=done)
    await capture("templates/index", done)  # default options

Blocking style (no running event loop)::

    entries = capture_sync("templates/index", ResolutionOptions(extension=".html"))
"""

from __future__ import annotations

import asyncio
import inspect
import os
from collections.abc import Callable, Mapping
from typing import Any

from fscapture.domain.capture import CaptureEntry, ResolutionOptions
from fscapture.exceptions import InvalidOptionError
from fscapture.logging import get_logger
from fscapture.resolver import resolve

logger = get_logger(__name__)

CaptureCallback = Callable[[Exception | None, list[CaptureEntry] | None], Any]
CaptureOptions = ResolutionOptions | Mapping[str, Any] | None


async def capture(
    path: str | os.PathLike[str],
    options: CaptureOptions | CaptureCallback = None,
    *,
    callback: CaptureCallback | None = None,
) -> Any:
    """Capture the file and/or directory that ``path`` refers to.

    Parameters
    ----------
    path : str | os.PathLike[str]
        Base path of the resource
    options : ResolutionOptions | Mapping[str, Any] | Callable | None
        ``extension`` (default ``""``) and ``sort`` (default
        ``SortOrder.PREFER_BASE_FIRST``, or the integer ``2``). A callable
        here is taken as ``callback`` and default options are used.
    callback : CaptureCallback | None
        Optional ``callback(error, results)``. May be a plain function or a
        coroutine function.

    Returns
    -------
    list[CaptureEntry] | Any
        The existing entries in priority order, or the callback's return
        value when a callback is given

    Raises
    ------
    InvalidOptionError
        If options are invalid and no callback is given
    OSError
        If a candidate cannot be stat'ed for a reason other than not
        existing, and no callback is given
    """
    if callable(options):
        if callback is not None:
            raise InvalidOptionError("options", "callback given both positionally and by keyword")
        callback, options = options, None

    if callback is None:
        return await resolve(path, options)

    try:
        results = await resolve(path, options)
    except Exception as e:
        logger.debug("Delivering capture error to callback: {}", e)
        outcome = callback(e, None)
    else:
        outcome = callback(None, results)

    if inspect.isawaitable(outcome):
        return await outcome
    return outcome


def capture_sync(path: str | os.PathLike[str], options: CaptureOptions = None) -> list[CaptureEntry]:
    """Blocking variant of :func:`capture` for code without an event loop.

    Raises
    ------
    RuntimeError
        If called from within a running event loop
    """
    return asyncio.run(resolve(path, options))


__all__ = ["CaptureCallback", "CaptureOptions", "capture", "capture_sync"]
