"""Build information reported by ``kubeplug version``."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from kubeplug import _build

DISTRIBUTION = "kubeplug"
UNKNOWN = "unknown"

# Where the plugin index is fetched from unless overridden in config.
DEFAULT_INDEX_URI = "https://github.com/kubernetes-sigs/krew-index.git"


def git_tag() -> str:
    """Release tag the running code was built from, e.g. ``v0.4.2``."""
    try:
        return f"v{version(DISTRIBUTION)}"
    except PackageNotFoundError:
        return UNKNOWN


def git_commit() -> str:
    """Commit the release was built from, or ``unknown`` for source checkouts."""
    return _build.GIT_COMMIT or UNKNOWN
