"""Locate the program file of the running process.

Under a console-script entry point ``sys.argv[0]`` is the script the user
(or kubectl's plugin dispatch) actually ran, which is what identity
resolution needs.  Frozen bundles report their own executable instead.
The returned path is raw: links are left for the resolver.
"""

from __future__ import annotations

import os
import shutil
import sys

from kubeplug.domain.errors import InputError


def is_frozen() -> bool:
    """True when running from a frozen bundle (PyInstaller and friends)."""
    return bool(getattr(sys, "frozen", False))


def current_executable() -> str:
    """Return the raw path of the running program.

    A bare name that does not exist relative to the working directory is
    looked up on ``$PATH``.

    Raises:
        InputError: no program path can be determined.
    """
    if is_frozen():
        return sys.executable

    argv0 = sys.argv[0] if sys.argv else ""
    if not argv0:
        msg = "cannot determine the path of the running program"
        raise InputError(msg)

    if os.path.dirname(argv0) or os.path.exists(argv0):
        return argv0
    found = shutil.which(argv0)
    if found is None:
        msg = f"running program {argv0!r} not found on PATH"
        raise InputError(msg)
    return found
