"""Command: version and path diagnostics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from kubeplug.commands._base import KubeplugCommand

if TYPE_CHECKING:
    from kubeplug.commands._context import AppContext


@click.command(
    cls=KubeplugCommand,
    examples="""\
  kubeplug version
  kubectl kubeplug version
  kubeplug --json version
  kubeplug -q version
  KUBEPLUG_ROOT=/opt/kubeplug kubeplug -v version""",
)
@click.pass_obj
def version(app: AppContext) -> None:
    """Show kubeplug version and diagnostics.

    \b
    Remarks:
      - IsPlugin is true if kubeplug is executed as a kubectl plugin
      - ExecutedVersion is the version of the running binary, read from its path
      - GitTag describes the release kubeplug is built from
      - GitCommit describes the git revision kubeplug is built from
      - IndexURI is the URI the plugin index is updated from
      - BasePath is the root directory of the kubeplug installation
      - IndexPath stores the local copy of the index repository
      - InstallPath is the directory for plugin installations
      - DownloadPath is the directory for temporary plugin downloads
      - BinPath holds the entry points of installed plugins
    """
    from kubeplug.infrastructure.executable import current_executable
    from kubeplug.services.version import VersionService

    try:
        self_path = current_executable()
    except ValueError as exc:
        raise click.ClickException(f"failed to get the own executable path: {exc}") from exc

    structlog.contextvars.bind_contextvars(self_path=self_path)

    svc = VersionService(app.layout, index_uri=app.settings.index.uri)
    app.emit(svc.report(self_path))
