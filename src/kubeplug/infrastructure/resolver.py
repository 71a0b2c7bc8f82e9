"""Path canonicalisation with a bounded symlink walk.

:func:`realpath` turns any path into an absolute path with every symbolic
link dereferenced and every ``.``/``..`` collapsed.  The walk is done here
rather than with ``os.path.realpath`` so cycle handling and error reporting
are the same on every platform:

- Each link followed costs one hop; more than :data:`MAX_SYMLINK_HOPS`
  raises :class:`ResolutionError`.  Cycles therefore terminate.
- A missing segment is not an error.  Everything from the first missing
  segment on is appended lexically.
- An existing file used as a directory, permission errors, and any other
  ``OSError`` raise :class:`ResolutionError`.

Only ``lstat`` and ``readlink`` are used.  Nothing is written.
"""

from __future__ import annotations

import logging
import os
import stat
from collections import deque
from collections.abc import Callable
from pathlib import Path

from kubeplug.domain.errors import InputError, ResolutionError

logger = logging.getLogger(__name__)

MAX_SYMLINK_HOPS = 40

# Signature shared by realpath and test doubles.
Resolver = Callable[[str | os.PathLike[str]], Path]

_SKIP = frozenset({"", os.curdir})


def _split(path: str, drive: str = "") -> tuple[str, list[str]]:
    """Split an absolute *path* into ``(anchor, segments)``.

    A rooted path without a drive (``\\foo`` on Windows) keeps *drive*.
    """
    own_drive, rest = os.path.splitdrive(path)
    if os.altsep:
        rest = rest.replace(os.altsep, os.sep)
    return (own_drive or drive) + os.sep, rest.split(os.sep)


def _is_rooted(path: str) -> bool:
    _drive, rest = os.path.splitdrive(path)
    return rest.startswith(os.sep) or bool(os.altsep and rest.startswith(os.altsep))


def _segments(path: str) -> list[str]:
    if os.altsep:
        path = path.replace(os.altsep, os.sep)
    return path.split(os.sep)


def _join(anchor: str, parts: list[str]) -> str:
    return anchor + os.sep.join(parts)


def _apply_lexically(parts: list[str], pending: deque[str]) -> None:
    while pending:
        name = pending.popleft()
        if name in _SKIP:
            continue
        if name == os.pardir:
            if parts:
                parts.pop()
            continue
        parts.append(name)


def _absolute(raw: str) -> str:
    if os.path.isabs(raw):
        return raw
    try:
        cwd = os.getcwd()
    except OSError as exc:
        raise ResolutionError("cannot determine the working directory", raw) from exc
    return os.path.join(cwd, raw)


def realpath(path: str | os.PathLike[str]) -> Path:
    """Return the canonical absolute form of *path*.

    Raises:
        InputError: *path* is empty or contains a NUL byte.
        ResolutionError: the link budget is exceeded, a non-directory is
            used as a directory, or the filesystem refuses a query.
    """
    raw = os.fspath(path)
    if not raw:
        msg = "path must not be empty"
        raise InputError(msg)
    if "\x00" in raw:
        msg = f"path contains a NUL byte: {raw!r}"
        raise InputError(msg)

    full = _absolute(raw)
    anchor, segments = _split(full)
    pending: deque[str] = deque(segments)
    parts: list[str] = []
    hops = 0

    while pending:
        name = pending.popleft()
        if name in _SKIP:
            continue
        if name == os.pardir:
            # parts is already link-free, so its lexical parent is its real parent
            if parts:
                parts.pop()
            continue

        candidate = _join(anchor, [*parts, name])
        try:
            st = os.lstat(candidate)
        except FileNotFoundError:
            parts.append(name)
            _apply_lexically(parts, pending)
            break
        except OSError as exc:
            reason = exc.strerror or exc.__class__.__name__
            raise ResolutionError(f"cannot query path ({reason})", candidate) from exc

        if stat.S_ISLNK(st.st_mode):
            hops += 1
            if hops > MAX_SYMLINK_HOPS:
                msg = f"too many levels of symbolic links (limit {MAX_SYMLINK_HOPS})"
                raise ResolutionError(msg, raw)
            try:
                target = os.readlink(candidate)
            except OSError as exc:
                reason = exc.strerror or exc.__class__.__name__
                raise ResolutionError(f"cannot read link ({reason})", candidate) from exc
            logger.debug("Following symlink %s -> %s", candidate, target)
            if _is_rooted(target):
                anchor, target_parts = _split(target, drive=os.path.splitdrive(anchor)[0])
                parts = []
            else:
                target_parts = _segments(target)
            pending.extendleft(reversed(target_parts))
            continue

        if not stat.S_ISDIR(st.st_mode) and any(p not in _SKIP for p in pending):
            raise ResolutionError("not a directory", candidate)
        parts.append(name)

    return Path(_join(anchor, parts))
