"""Shared fixtures for fs-capture tests.

``capture_tree`` lays out the same folders and files the library's
behavioural tests rely on:

- folders: ``folder``, ``folder.txt``, ``same_name``
- files: ``file``, ``file.txt``, ``same_name.txt``
"""

from __future__ import annotations

import errno
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

import pytest

from fscapture.logging import reset_logging


@dataclass(frozen=True)
class CaptureTree:
    """Paths (as strings) of the fixture tree."""

    base: str
    folder: str
    folder_txt: str
    same_name: str
    file: str
    file_txt: str
    same_name_txt: str
    missing: str


@pytest.fixture()
def capture_tree(tmp_path: Path) -> CaptureTree:
    """Create the fixture folders and files under ``tmp_path``."""
    base = tmp_path / "tmp"
    base.mkdir()
    for name in ("folder", "folder.txt", "same_name"):
        (base / name).mkdir()
    for name in ("file", "file.txt", "same_name.txt"):
        (base / name).touch()

    return CaptureTree(
        base=str(base),
        folder=str(base / "folder"),
        folder_txt=str(base / "folder.txt"),
        same_name=str(base / "same_name"),
        file=str(base / "file"),
        file_txt=str(base / "file.txt"),
        same_name_txt=str(base / "same_name.txt"),
        missing=str(base / "missing"),
    )


def failing_stat(*failing: str, code: int = errno.EACCES) -> Callable[[str], os.stat_result]:
    """Return a stat function that raises ``OSError(code)`` for the given paths."""
    failing_paths = set(failing)

    def stat(path: str) -> os.stat_result:
        if path in failing_paths:
            raise OSError(code, os.strerror(code), path)
        return os.stat(path)

    return stat


@pytest.fixture()
def make_failing_stat() -> Callable[..., Callable[[str], os.stat_result]]:
    return failing_stat


@pytest.fixture(autouse=True)
def _clean_logging() -> Iterator[None]:
    """Drop handlers added by fscapture.logging after each test."""
    yield
    reset_logging()
