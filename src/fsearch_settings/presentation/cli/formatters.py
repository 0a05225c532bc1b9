"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels) out of the command module; knows
nothing about how settings are stored.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from fsearch_settings.domain.models.settings import LoadResult

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "FSearch Settings") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


# ---------------------------------------------------------------------------
# Settings rendering
# ---------------------------------------------------------------------------


def settings_table(result: LoadResult, title: str = "⚙️  FSearch Settings") -> None:
    """Print every setting; values that fell back to defaults are dimmed."""
    table = Table(title=title, show_header=True, border_style="blue")
    table.add_column("Group", style="cyan", width=12)
    table.add_column("Key", style="cyan", width=24)
    table.add_column("Value", style="green")

    for section_name, group in (("interface", "Interface"), ("search", "Search")):
        section = getattr(result.settings, section_name)
        for key, value in section.model_dump().items():
            shown = str(value).lower() if isinstance(value, bool) else str(value)
            if f"{section_name}.{key}" in result.defaulted:
                shown = f"[dim]{shown} (default)[/]"
            table.add_row(group, key, shown)

    console.print(table)
    locations_table(result.settings.locations)


def locations_table(locations: list[str]) -> None:
    """Print the ordered location list with 0-based indices."""
    table = Table(title="📁 Locations", show_header=True, border_style="blue")
    table.add_column("#", style="cyan", width=4)
    table.add_column("Path", style="green")

    if not locations:
        table.add_row("", "[dim]none[/]")
    for index, location in enumerate(locations):
        table.add_row(str(index), escape(location))

    console.print(table)
