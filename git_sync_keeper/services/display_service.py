"""Display service for status snapshots and branch state"""
from typing import Optional

from rich.console import Console
from rich.table import Table

from git_sync_keeper.constants import CLI_COLORS
from git_sync_keeper.formatters import (
    format_change_kind,
    format_divergence,
    format_divergence_hint,
    format_snapshot_summary,
)
from git_sync_keeper.models.branch import Divergence
from git_sync_keeper.models.status import StatusSnapshot

console = Console()


class DisplayService:
    def __init__(self, output: Optional[Console] = None):
        self.console = output or console

    def display_status(self, snapshot: StatusSnapshot) -> None:
        """Display a table of ready and not-ready changes."""
        if not snapshot.ok:
            self.console.print(f"[red]{format_snapshot_summary(snapshot)}[/red]")
            return

        if not snapshot.is_clean:
            table = Table()
            table.add_column("State")
            table.add_column("Change")
            table.add_column("Path")

            for state, record in (("ready", snapshot.ready), ("not ready", snapshot.not_ready)):
                style = CLI_COLORS["ready" if state == "ready" else "not_ready"]
                for kind, path in record.items():
                    table.add_row(state, format_change_kind(kind), path, style=style)

            self.console.print(table)

        self.console.print(format_snapshot_summary(snapshot))
        self.console.print(f"Tracked changes ready to commit: {snapshot.ready.count_tracked()}")

    def display_divergence(self, remote_ref: str, divergence: Divergence) -> None:
        style = CLI_COLORS.get(divergence)
        self.console.print(
            f"[{style}]{format_divergence(divergence)}[/{style}] "
            f"{remote_ref}: {format_divergence_hint(divergence)}"
        )
