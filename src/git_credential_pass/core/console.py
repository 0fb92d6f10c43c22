"""User-facing diagnostic output for the CLI.

Everything here renders to stderr. stdout carries the credential protocol
and is written only by ``credential.protocol``.

Usage::

    from git_credential_pass.core.console import status, make_probe_table

    status("No entry found", style="warning")  # ! No entry found
    get_console().print(make_probe_table(probes))
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from git_credential_pass.credential.resolver import Probe

# Console for output
_console = Console(stderr=True)

# Style prefixes
_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def status(message: str, *, style: str = "info", console: Console | None = None) -> None:
    """Print a status line with an optional style marker."""
    prefix = _STYLES.get(style, "")
    (console or _console).print(f"{prefix}{message}", highlight=False)


def make_probe_table(probes: Sequence[Probe], *, matched: str | None = None) -> Table:
    """Build a table of probed candidates in priority order.

    Args:
        probes: Every probed candidate, most specific first
        matched: The candidate the lookup selected, if any
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("candidate")
    table.add_column("entry", style="dim")
    table.add_column("exists", justify="center")

    for index, probe in enumerate(probes, start=1):
        if probe.candidate == matched:
            mark = "[green]✓ match[/green]"
        elif probe.exists:
            mark = "[green]✓[/green]"
        else:
            mark = "[dim]-[/dim]"
        table.add_row(str(index), probe.candidate, probe.entry, mark)

    return table
