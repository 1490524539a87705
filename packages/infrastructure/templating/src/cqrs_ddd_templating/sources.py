"""Filesystem primitives used for template resolution."""

from __future__ import annotations

import re
from pathlib import Path

_ABSOLUTE_PATTERN = re.compile(r"^(/|\w+://)")
_FILE_SCHEME = "file://"


def is_absolute(name: str) -> bool:
    """Names starting with ``/`` or a ``scheme://`` prefix are absolute."""
    return _ABSOLUTE_PATTERN.match(name) is not None


def to_local_path(location: str) -> Path | None:
    """Map a template location to a local path, or None for remote schemes."""
    if location.startswith(_FILE_SCHEME):
        return Path(location[len(_FILE_SCHEME) :])
    if re.match(r"^\w+://", location):
        return None
    return Path(location)


def path_exists(location: str) -> bool:
    """Return True if *location* names an existing template file."""
    path = to_local_path(location)
    return path is not None and path.is_file()


def read_source(location: str, encoding: str = "utf-8") -> str:
    """Read the template body stored at *location*."""
    path = to_local_path(location)
    if path is None:
        raise FileNotFoundError(f"Unsupported template location: {location}")
    return path.read_text(encoding=encoding)
