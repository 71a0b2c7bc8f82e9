"""InstallationLayout — the conventional directory tree under the base path.

Every directory is derived from one base by fixed suffix rules::

    <base>/index      local copy of the plugin index
    <base>/store      plugin installations
    <base>/bin        entry points (``bin/<version>/<binary>`` for kubeplug itself)
    <tmp>/kubeplug-downloads

The layout is built once at startup and passed explicitly to whoever
needs it.  It never reads process-wide state after construction.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DIRNAME = ".kubeplug"
INDEX_DIR = "index"
INSTALL_DIR = "store"
BIN_DIR = "bin"
DOWNLOAD_DIR = "kubeplug-downloads"


def default_base_path() -> Path:
    """Return ``~/.kubeplug`` for the current user."""
    return Path.home() / DEFAULT_DIRNAME


@dataclass(frozen=True)
class InstallationLayout:
    """Immutable set of absolute installation directories."""

    base_path: Path
    temp_dir: Path

    @classmethod
    def from_base(
        cls, base: str | os.PathLike[str], temp_dir: str | None = None
    ) -> InstallationLayout:
        """Build a layout rooted at *base*.

        A leading ``~`` is expanded to the home directory and a relative
        *base* is anchored at the current working directory.
        Symlinks are left untouched; canonicalisation is the resolver's job.
        """
        if not os.fspath(base):
            msg = "installation base path must not be empty"
            raise ValueError(msg)
        tmp = temp_dir or tempfile.gettempdir()
        return cls(
            base_path=Path(os.path.abspath(os.path.expanduser(base))),
            temp_dir=Path(os.path.abspath(tmp)),
        )

    @property
    def index_path(self) -> Path:
        return self.base_path / INDEX_DIR

    @property
    def install_path(self) -> Path:
        return self.base_path / INSTALL_DIR

    @property
    def bin_path(self) -> Path:
        return self.base_path / BIN_DIR

    @property
    def download_path(self) -> Path:
        return self.temp_dir / DOWNLOAD_DIR
