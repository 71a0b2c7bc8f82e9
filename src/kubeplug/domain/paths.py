"""Segment-aware path containment.

Paths are compared as sequences of segments, never as strings, so
``/opt/tool-extra`` is not inside ``/opt/tool``.  Trailing separators and
redundant ``.`` segments are ignored.  Segment comparison follows the
platform's case rules (``os.path.normcase``).
"""

from __future__ import annotations

import os
from pathlib import PurePath


def path_segments(path: str | os.PathLike[str]) -> tuple[str, ...]:
    """Split *path* into segments, anchor (root or drive) first."""
    return PurePath(os.path.normpath(os.fspath(path))).parts


def _same(a: str, b: str) -> bool:
    return os.path.normcase(a) == os.path.normcase(b)


def subpath_segments(
    base: str | os.PathLike[str], path: str | os.PathLike[str]
) -> tuple[str, ...] | None:
    """Return the segments of *path* below *base*, or None if not contained.

    ``path == base`` is contained and yields an empty tuple.
    """
    base_parts = path_segments(base)
    parts = path_segments(path)
    if len(parts) < len(base_parts):
        return None
    if not all(_same(a, b) for a, b in zip(base_parts, parts)):
        return None
    return parts[len(base_parts) :]


def is_subpath(base: str | os.PathLike[str], path: str | os.PathLike[str]) -> bool:
    """True if *path* equals *base* or lies beneath it."""
    return subpath_segments(base, path) is not None
