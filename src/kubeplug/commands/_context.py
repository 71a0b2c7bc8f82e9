"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the immutable installation layout and the
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kubeplug.domain.layout import InstallationLayout, default_base_path
from kubeplug.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from kubeplug.config.settings import KubeplugSettings
    from kubeplug.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The layout is built lazily so ``--help`` and ``--version`` never touch
    the home directory.
    """

    def __init__(self, settings: KubeplugSettings) -> None:
        self.settings = settings
        self._layout: InstallationLayout | None = None

        from kubeplug.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def layout(self) -> InstallationLayout:
        """The installation layout (created on first access, then fixed)."""
        if self._layout is None:
            base = self.settings.root or default_base_path()
            self._layout = InstallationLayout.from_base(base)
        return self._layout

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)
        click.echo(output)
