"""Executable identity — plugin mode and executed version from a path.

kubeplug installs itself as ``<base>/bin/<version>/<binary>``.  When the
canonical path of the running program lies inside the canonical bin
directory, it was run directly and the segment right below ``bin`` names
its version.  Anywhere else (e.g. ``/usr/local/bin/kubectl-kubeplug``
reached through kubectl's plugin dispatch) it is running as a plugin and
the version cannot be read from the path.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from kubeplug.domain.errors import InputError
from kubeplug.domain.layout import BIN_DIR
from kubeplug.domain.paths import subpath_segments
from kubeplug.infrastructure.resolver import realpath

if TYPE_CHECKING:
    from kubeplug.domain.layout import InstallationLayout
    from kubeplug.infrastructure.resolver import Resolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutableIdentity:
    """Who the running program is, as derived from where it lives."""

    self_path: str
    resolved_path: Path
    is_plugin: bool
    version: str = ""


def classify(
    resolved: str | os.PathLike[str], bin_root: str | os.PathLike[str]
) -> tuple[str, bool]:
    """Return ``(executed_version, is_plugin)`` for two canonical paths.

    The version is only known for ``bin_root/<version>/<anything>``; a
    program sitting directly in *bin_root* is direct but unversioned.
    """
    below = subpath_segments(bin_root, resolved)
    if below is None:
        return "", True
    if len(below) < 2:
        return "", False
    return below[0], False


def get_executed_version(
    install_root: str | os.PathLike[str],
    self_path: str | os.PathLike[str],
    resolve: Resolver = realpath,
) -> tuple[str, bool]:
    """Return ``(executed_version, is_plugin)`` for the program at *self_path*.

    *install_root* is the base of the installation; the bin directory is
    ``install_root/bin``.  Both paths are canonicalised with *resolve*
    before comparison.

    Raises:
        InputError: *self_path* or *install_root* is empty.
        ResolutionError: propagated from *resolve*.
    """
    identity = _identify(install_root, self_path, resolve)
    return identity.version, identity.is_plugin


def _identify(
    install_root: str | os.PathLike[str],
    self_path: str | os.PathLike[str],
    resolve: Resolver,
) -> ExecutableIdentity:
    raw = os.fspath(self_path)
    if not raw:
        msg = "executable path must not be empty"
        raise InputError(msg)
    root = os.fspath(install_root)
    if not root:
        msg = "installation root must not be empty"
        raise InputError(msg)

    resolved = resolve(raw)
    bin_root = resolve(os.path.join(root, BIN_DIR))
    version, is_plugin = classify(resolved, bin_root)
    logger.debug(
        "Executable %s resolved to %s (bin=%s, plugin=%s, version=%r)",
        raw,
        resolved,
        bin_root,
        is_plugin,
        version,
    )
    return ExecutableIdentity(
        self_path=raw,
        resolved_path=resolved,
        is_plugin=is_plugin,
        version=version,
    )


class ExecutedVersionResolver:
    """Resolve :class:`ExecutableIdentity` against one installation layout.

    Usage::

        resolver = ExecutedVersionResolver(layout)
        identity = resolver.identify(current_executable())
    """

    def __init__(self, layout: InstallationLayout, resolve: Resolver = realpath) -> None:
        self._layout = layout
        self._resolve = resolve

    @property
    def layout(self) -> InstallationLayout:
        return self._layout

    def identify(self, self_path: str | os.PathLike[str]) -> ExecutableIdentity:
        """Canonicalise *self_path* and classify it against the layout's bin dir."""
        return _identify(self._layout.base_path, self_path, self._resolve)
