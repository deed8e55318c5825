"""Errors raised by fs-capture itself.

Only bad input and bad configuration produce these. A candidate that does
not exist is never an error, and any other ``os.stat`` failure reaches the
caller as the original :class:`OSError`, so ``except PermissionError`` and
``err.errno`` checks keep working across this library.
"""

from __future__ import annotations


class FSCaptureError(Exception):
    """Root of the fs-capture errors; never a subclass of :class:`OSError`."""


class ConfigurationError(FSCaptureError):
    """A config file, ``[tool.fscapture]`` table or ``FSCAPTURE_*`` value is unusable.

    ``source`` names where the bad value came from: a file path for
    unreadable files, or the section (``"logging"``) for bad values.

    Examples
    --------
    >>> str(ConfigurationError("logging", "unknown format 'xml'"))
    "fs-capture configuration (logging): unknown format 'xml'"
    """

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"fs-capture configuration ({source}): {reason}")
        self.source = source
        self.reason = reason


class ValidationError(FSCaptureError):
    """A caller-supplied value was rejected before touching the filesystem.

    Attributes
    ----------
    field : str
        The rejected argument or option key (``"path"``, ``"sort"``, ...)
    constraint : str
        What the value should have been
    value : object
        The offending value, ``None`` when there is nothing useful to show
    """

    def __init__(self, field: str, constraint: str, value: object = None) -> None:
        msg = f"invalid {field}: {constraint}"
        if value is not None:
            msg += f" (got {value!r})"
        super().__init__(msg)
        self.field = field
        self.constraint = constraint
        self.value = value


class InvalidOptionError(ValidationError):
    """Resolution options, the path or the callback cannot be honoured.

    Examples
    --------
    >>> str(InvalidOptionError("sort", "must be one of [1, 2]", value=3))
    'invalid sort: must be one of [1, 2] (got 3)'
    """


__all__ = [
    "ConfigurationError",
    "FSCaptureError",
    "InvalidOptionError",
    "ValidationError",
]
