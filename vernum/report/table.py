"""Rich terminal rendering of version families.

One row per family: original name, member count, latest file and its
version, plus the older members.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console
from rich.table import Table

from vernum.versioning.versioned import VersionedFiles


def render_groups(groups: Mapping[str, VersionedFiles], title: str = "Version families") -> Table:
    """Build a table of families, in key order."""
    table = Table(title=title, expand=False)
    table.add_column("Original", style="cyan")
    table.add_column("Files", justify="right")
    table.add_column("Latest", style="green")
    table.add_column("Version", style="yellow")
    table.add_column("Older", style="dim")

    for original_name, family in groups.items():
        latest = family.get_latest()
        version = family.latest_version
        older = [f.filename for f in family.files[1:]]
        table.add_row(
            original_name,
            str(len(family)),
            latest.filename if latest is not None else "",
            str(version) if version is not None else "[dim]original[/dim]",
            ", ".join(older),
        )

    return table


def print_groups(groups: Mapping[str, VersionedFiles], console: Console | None = None) -> None:
    console = console or Console()
    if not groups:
        console.print("[dim]No files found.[/dim]")
        return
    console.print(render_groups(groups))
