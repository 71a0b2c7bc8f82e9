"""Click command class with an ``--examples`` flag.

``--help`` stays short; longer usage samples live behind ``--examples``,
which prints them and exits before any other option is processed.
"""

from __future__ import annotations

from typing import Any

import click


class KubeplugCommand(click.Command):
    """A Command that takes ``examples=`` and exposes them as ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
