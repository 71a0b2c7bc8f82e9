"""VersionService — version and path diagnostics for ``kubeplug version``.

Fields reported:

- ``is_plugin``: kubeplug was dispatched by kubectl as a plugin.
- ``executed_version``: version of the running binary, read from its path.
- ``git_tag`` / ``git_commit``: the release kubeplug was built from.
- ``index_uri``: where the plugin index is updated from.
- ``base_path``: root of the kubeplug installation.
- ``index_path``: local copy of the index repository.
- ``install_path``: plugin installations.
- ``download_path``: scratch space for plugin downloads.
- ``bin_path``: entry points of installed plugins.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from kubeplug.domain.build import DEFAULT_INDEX_URI, git_commit, git_tag
from kubeplug.domain.errors import InputError, ResolutionError
from kubeplug.infrastructure.resolver import realpath
from kubeplug.services.identity import ExecutedVersionResolver
from kubeplug.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from kubeplug.domain.layout import InstallationLayout
    from kubeplug.infrastructure.resolver import Resolver

logger = logging.getLogger(__name__)

_FAILURE_PREFIX = "failed to find current kubeplug version"


class VersionService:
    """Builds the ``version`` report for one installation layout."""

    def __init__(
        self,
        layout: InstallationLayout,
        *,
        index_uri: str = DEFAULT_INDEX_URI,
        resolve: Resolver = realpath,
    ) -> None:
        self._layout = layout
        self._index_uri = index_uri
        self._identity = ExecutedVersionResolver(layout, resolve)

    def report(self, self_path: str | os.PathLike[str]) -> ServiceResult:
        """Resolve the running program at *self_path* and report diagnostics."""
        op = "version"
        raw = os.fspath(self_path)
        try:
            identity = self._identity.identify(raw)
        except InputError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_INPUT",
                    message=f"{_FAILURE_PREFIX}: {exc}",
                    detail={"self_path": raw},
                ),
            )
        except ResolutionError as exc:
            logger.debug("Resolution of %s failed", raw, exc_info=True)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="RESOLUTION_FAILED",
                    message=f"{_FAILURE_PREFIX}: {exc}",
                    detail={"self_path": raw, "path": exc.path},
                ),
            )

        layout = self._layout
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "is_plugin": identity.is_plugin,
                "executed_version": identity.version,
                "git_tag": git_tag(),
                "git_commit": git_commit(),
                "index_uri": self._index_uri,
                "base_path": str(layout.base_path),
                "index_path": str(layout.index_path),
                "install_path": str(layout.install_path),
                "download_path": str(layout.download_path),
                "bin_path": str(layout.bin_path),
            },
            meta={
                "self_path": identity.self_path,
                "resolved_path": str(identity.resolved_path),
            },
        )
