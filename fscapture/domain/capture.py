"""Domain models for capture results and resolution options.

:class:`CaptureEntry` is the public result unit. :class:`ResolutionOptions`
controls which candidates are probed and in which order.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Mapping
from enum import IntEnum, StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from fscapture.exceptions import InvalidOptionError


class EntryType(StrEnum):
    """Type of a captured filesystem entry.

    Anything that is not a regular file is reported as ``DIRECTORY``.
    """

    FILE = "file"
    DIRECTORY = "directory"

    @classmethod
    def from_mode(cls, mode: int) -> EntryType:
        """Classify an ``st_mode`` value."""
        return cls.FILE if stat.S_ISREG(mode) else cls.DIRECTORY


class SortOrder(IntEnum):
    """Candidate ordering policy.

    The integer values are part of the public contract: callers may pass
    ``1`` or ``2`` instead of the enum member.
    """

    PREFER_EXTENSION_FIRST = 1
    PREFER_BASE_FIRST = 2


class CaptureEntry(BaseModel):
    """A filesystem entry that existed when it was probed.

    Attributes
    ----------
    path : str
        The candidate path exactly as it was probed.
    stats : os.stat_result
        Metadata returned by ``os.stat``.
    entry_type : EntryType
        ``FILE`` for regular files, ``DIRECTORY`` otherwise.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    path: str
    stats: os.stat_result
    entry_type: EntryType

    @classmethod
    def from_stat(cls, path: str, stats: os.stat_result) -> CaptureEntry:
        """Build an entry from a successful stat call."""
        return cls(path=path, stats=stats, entry_type=EntryType.from_mode(stats.st_mode))

    @property
    def is_file(self) -> bool:
        return self.entry_type is EntryType.FILE

    @property
    def is_directory(self) -> bool:
        return self.entry_type is EntryType.DIRECTORY


class ResolutionOptions(BaseModel):
    """Options for a single resolution call.

    Attributes
    ----------
    extension : str, default=""
        Suffix appended to the base path to form the alternate candidate.
    sort : SortOrder, default=SortOrder.PREFER_BASE_FIRST
        Which candidate comes first in the result.

    Examples
    --------
    >>> ResolutionOptions(extension=".txt", sort=1).sort
    <SortOrder.PREFER_EXTENSION_FIRST: 1>
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    extension: str = ""
    sort: SortOrder = SortOrder.PREFER_BASE_FIRST

    @field_validator("sort", mode="before")
    @classmethod
    def _exact_sort(cls, value: Any) -> Any:
        # No lax coercion: "1", True and 1.0 are not sort orders
        if isinstance(value, SortOrder):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            if value in SortOrder._value2member_map_:
                return SortOrder(value)
        raise ValueError(f"must be one of {[s.value for s in SortOrder]}")

    @classmethod
    def coerce(cls, options: ResolutionOptions | Mapping[str, Any] | None) -> ResolutionOptions:
        """Normalize caller-supplied options, applying defaults.

        Raises
        ------
        InvalidOptionError
            If the options are of the wrong type or hold unrecognized values.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise InvalidOptionError(
                "options", "must be ResolutionOptions, a mapping or None", type(options).__name__
            )
        try:
            return cls.model_validate(dict(options))
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "options"
            raise InvalidOptionError(field, first["msg"], first.get("input")) from e


__all__ = ["CaptureEntry", "EntryType", "ResolutionOptions", "SortOrder"]
