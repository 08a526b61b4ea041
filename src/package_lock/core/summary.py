"""Terminal summary of a lock registry."""

from rich.console import Console
from rich.table import Table

from package_lock.core.registry import LockRegistry


def build_summary_table(registry: LockRegistry) -> Table:
    """One row per locked package."""
    table = Table(title=f"Locked packages ({len(registry)})")
    table.add_column("Package", style="cyan")
    table.add_column("Version")
    table.add_column("Type")
    table.add_column("Operation")
    table.add_column("Dev", justify="center")
    table.add_column("Parent", style="dim")

    for package in registry:
        table.add_row(
            package.pretty_name,
            package.pretty_version or "-",
            package.type or "-",
            package.operation or "-",
            "yes" if package.is_dev else "no",
            package.parent_name or "-",
        )

    return table


def print_summary(registry: LockRegistry, console: Console | None = None) -> None:
    console = console or Console()
    console.print(build_summary_table(registry))
