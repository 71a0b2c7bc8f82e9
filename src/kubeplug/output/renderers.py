"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from kubeplug.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from kubeplug.services.result import ServiceResult


# Display labels for the version report, in print order.
VERSION_LABELS: dict[str, str] = {
    "is_plugin": "IsPlugin",
    "executed_version": "ExecutedVersion",
    "git_tag": "GitTag",
    "git_commit": "GitCommit",
    "index_uri": "IndexURI",
    "base_path": "BasePath",
    "index_path": "IndexPath",
    "install_path": "InstallPath",
    "download_path": "DownloadPath",
    "bin_path": "BinPath",
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return result.data.get("executed_version") or "unknown"


# ── Helpers ───────────────────────────────────────────────────────────


def _display(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="kp.ok")
    op = Text(f"  {result.op}", style="kp.op")
    console.print(label, op, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {_display(v)}", markup=False)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="kp.error")
    op = Text(f"  {result.op}", style="kp.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Version renderer ──────────────────────────────────────────────────


def _version_style(key: str, value: Any) -> str:
    if key == "is_plugin":
        return "kp.flag.on" if value else "kp.flag.off"
    if key == "executed_version":
        return "kp.version"
    if key.endswith("_path"):
        return "kp.path"
    return ""


def _render_version(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the version report as an OPTION/VALUE table."""
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("OPTION", no_wrap=True)
    table.add_column("VALUE", overflow="fold")
    for key, label in VERSION_LABELS.items():
        if key not in result.data:
            continue
        value = result.data[key]
        table.add_row(label, Text(_display(value), style=_version_style(key, value)))
    console.print(table)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "version": _render_version,
}
